"""Domain enums."""

from uniform_http.domain.enums.http_method import HttpMethod

__all__ = ["HttpMethod"]
