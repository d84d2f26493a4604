"""httpx-backed transport.

HttpxTransport owns one ``httpx.AsyncClient`` configured at construction and
turns each call into either a resolved TransportResponse or a raised
TransportError:

- Success status (per ``TransportOptions.success_statuses``): resolved
- Any other status: TransportError with ``status`` and nested ``response``
- Timeout: TransportError(ECONNABORTED), no status, no response
- Too many redirects: TransportError(ERR_TOO_MANY_REDIRECTS)
- Any other httpx.RequestError: TransportError(ERR_NETWORK)

The originating httpx exception is chained as ``__cause__``.

Architecture:
    - Infrastructure layer (adapter over httpx)
    - Implements TransportProtocol structurally
"""

from typing import Any, Self

import httpx
from pydantic import BaseModel

from uniform_http.core.constants import (
    CLIENT_ERROR_STATUS_RANGE,
    JSON_CONTENT_TYPE,
    JSON_SUFFIX,
)
from uniform_http.core.enums import TransportErrorCode
from uniform_http.domain.enums import HttpMethod
from uniform_http.domain.value_objects import QueryValue, TransportResponse
from uniform_http.infrastructure.http.errors import TransportError
from uniform_http.infrastructure.http.options import TransportOptions


class HttpxTransport:
    """Transport over a single long-lived ``httpx.AsyncClient``.

    Attributes:
        _client: Configured async client (owned; closed by aclose()).
        _options: Options the client was built with.

    Example:
        >>> transport = HttpxTransport.create("https://api.example.com")
        >>> response = await transport.request(method=HttpMethod.GET, url="/posts/1")
        >>> response.status
        200
    """

    def __init__(self, client: httpx.AsyncClient, options: TransportOptions) -> None:
        """Wrap an already-configured client.

        Args:
            client: Async client to send requests with.
            options: Options the client was configured from.
        """
        self._client = client
        self._options = options

    @classmethod
    def create(
        cls,
        base_url: str,
        options: TransportOptions | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> Self:
        """Build a transport for a base URL.

        Args:
            base_url: Base URL relative request URLs are resolved against.
            options: Transport options; defaults to TransportOptions().
            http_transport: Low-level httpx transport to send through
                (e.g. ``httpx.MockTransport`` or ``httpx.ASGITransport``).

        Returns:
            HttpxTransport owning a new ``httpx.AsyncClient``.
        """
        options = options or TransportOptions()
        client = httpx.AsyncClient(
            base_url=base_url,
            transport=http_transport,
            **options.client_kwargs(),
        )
        return cls(client, options)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def options(self) -> TransportOptions:
        return self._options

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def request(
        self,
        *,
        method: HttpMethod,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, QueryValue] | None = None,
        data: Any = None,
    ) -> TransportResponse[Any]:
        """Send one request.

        Args:
            method: HTTP method.
            url: URL relative to the base URL (or absolute).
            headers: Per-call headers; None sends only the defaults.
            params: Query parameters; None sends none.
            data: Body. bytes/str are sent as-is, pydantic models and other
                values are JSON-encoded, None sends no body.

        Returns:
            TransportResponse for a status within the success range.

        Raises:
            TransportError: On a non-success status or when no response was
                received.
        """
        try:
            response = await self._client.request(
                method=method.value,
                url=url,
                headers=headers,
                params=params,
                **_encode_body(data),
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timed out: {e}",
                code=TransportErrorCode.ECONNABORTED,
                method=method.value,
                url=url,
            ) from e
        except httpx.TooManyRedirects as e:
            raise TransportError(
                f"Maximum number of redirects exceeded: {e}",
                code=TransportErrorCode.ERR_TOO_MANY_REDIRECTS,
                method=method.value,
                url=url,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Network error: {e}",
                code=TransportErrorCode.ERR_NETWORK,
                method=method.value,
                url=url,
            ) from e

        transport_response = TransportResponse(
            status=response.status_code,
            headers=dict(response.headers),
            data=_decode_body(response),
        )

        if not self._options.is_success(response.status_code):
            low, high = CLIENT_ERROR_STATUS_RANGE
            code = (
                TransportErrorCode.ERR_BAD_REQUEST
                if low <= response.status_code <= high
                else TransportErrorCode.ERR_BAD_RESPONSE
            )
            raise TransportError(
                f"Request failed with status code {response.status_code}",
                code=code,
                status=response.status_code,
                response=transport_response,
                method=method.value,
                url=url,
            )

        return transport_response

    async def aclose(self) -> None:
        """Close the underlying client and its connections."""
        await self._client.aclose()


def _encode_body(data: Any) -> dict[str, Any]:
    """Map a body value onto ``httpx.AsyncClient.request`` keyword arguments."""
    if data is None:
        return {}
    if isinstance(data, (bytes, str)):
        return {"content": data}
    if isinstance(data, BaseModel):
        return {"json": data.model_dump(mode="json")}
    return {"json": data}


def _decode_body(response: httpx.Response) -> Any:
    """Decode a response body.

    Empty bodies decode to None. JSON media types (``application/json`` and
    ``+json`` suffixes) are parsed, falling back to text when the payload is
    not valid JSON. Everything else is returned as text.
    """
    if not response.content:
        return None

    media_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type == JSON_CONTENT_TYPE or media_type.endswith(JSON_SUFFIX):
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text
