"""Value objects (immutable, no identity)."""

from uniform_http.domain.value_objects.http_request import HttpRequest, QueryValue
from uniform_http.domain.value_objects.http_response import HttpResponse
from uniform_http.domain.value_objects.transport_response import TransportResponse

__all__ = ["HttpRequest", "HttpResponse", "QueryValue", "TransportResponse"]
