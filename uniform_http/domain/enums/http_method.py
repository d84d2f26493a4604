"""HTTP methods supported by the facade."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP request methods.

    String-valued so members can be passed straight to the transport.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
