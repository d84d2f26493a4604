"""Transport failure type.

TransportError is raised by HttpxTransport for every failed call: a response
with a non-success status, or no response at all. It is the object callers
find in ``HttpResponse.error``.

Attributes follow the transport failure contract:
- ``status`` is set only when the peer answered
- ``response`` is the nested TransportResponse, set only when the peer answered
"""

from typing import Any

from uniform_http.core.enums import TransportErrorCode
from uniform_http.domain.value_objects import TransportResponse


class TransportError(Exception):
    """Raised when an HTTP call fails at the transport level."""

    def __init__(
        self,
        message: str,
        *,
        code: TransportErrorCode,
        status: int | None = None,
        response: TransportResponse[Any] | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        """Initialize transport error.

        Args:
            message: Human-readable description.
            code: Machine-readable failure code.
            status: HTTP status, when a response was received.
            response: Nested response, when one was received.
            method: HTTP method of the failed call.
            url: URL of the failed call.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.response = response
        self.method = method
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured inspection or logging."""
        return {
            "message": self.message,
            "code": self.code.value,
            "status": self.status,
            "method": self.method,
            "url": self.url,
        }

    def __repr__(self) -> str:
        return (
            f"TransportError(code={self.code.value}, status={self.status}, "
            f"message={self.message!r})"
        )
