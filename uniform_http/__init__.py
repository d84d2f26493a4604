"""uniform_http - typed HTTP request facade.

Every call returns an HttpResponse with the same shape, whether the request
succeeded, failed with an HTTP error status, or never reached the server.

Usage:
    from uniform_http import HttpClient

    async with HttpClient("https://jsonplaceholder.typicode.com") as client:
        response = await client.get("/posts/1")
        print(response.status, response.data)
"""

from uniform_http.application import HttpClient, build_response
from uniform_http.core import (
    Environment,
    Failure,
    Result,
    Success,
    TransportErrorCode,
    try_catch,
)
from uniform_http.domain.enums import HttpMethod
from uniform_http.domain.value_objects import (
    HttpRequest,
    HttpResponse,
    TransportResponse,
)
from uniform_http.infrastructure.http import (
    HttpxTransport,
    TransportError,
    TransportOptions,
)

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Failure",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Result",
    "Success",
    "TransportError",
    "TransportErrorCode",
    "TransportOptions",
    "TransportResponse",
    "build_response",
    "try_catch",
]
