"""HTTP transport adapter (httpx)."""

from uniform_http.infrastructure.http.errors import TransportError
from uniform_http.infrastructure.http.httpx_transport import HttpxTransport
from uniform_http.infrastructure.http.options import TransportOptions

__all__ = ["HttpxTransport", "TransportError", "TransportOptions"]
