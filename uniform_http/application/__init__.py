"""Application layer - the HTTP facade."""

from uniform_http.application.http_client import HttpClient, build_response

__all__ = ["HttpClient", "build_response"]
