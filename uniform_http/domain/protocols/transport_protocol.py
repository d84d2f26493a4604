"""TransportProtocol definition.

The transport performs the actual network call. HttpClient depends on this
protocol only, so any object with matching signatures can stand in for the
httpx-backed implementation.

Failure contract:
    ``request`` resolves with a TransportResponse, or raises. A raised
    exception MAY carry:
    - ``status``: int HTTP status of the failed call
    - ``response``: TransportResponse describing what the peer returned
    Failures that happened before any response existed carry neither.
"""

from typing import Any, Protocol

from uniform_http.domain.enums import HttpMethod
from uniform_http.domain.value_objects import QueryValue, TransportResponse


class TransportProtocol(Protocol):
    """Protocol for HTTP transports used by HttpClient."""

    async def request(
        self,
        *,
        method: HttpMethod,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, QueryValue] | None = None,
        data: Any = None,
    ) -> TransportResponse[Any]:
        """Perform one HTTP request.

        Args:
            method: HTTP method.
            url: URL relative to the transport's base URL (or absolute).
            headers: Per-call headers; None sends only the defaults.
            params: Query parameters; None sends none.
            data: Request body; None sends no body.

        Returns:
            TransportResponse for a successful status.

        Raises:
            Exception: On non-success status or connection failure.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the transport."""
        ...
