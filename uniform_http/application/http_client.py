"""HTTP facade.

HttpClient presents one request/response contract over a transport: every
call resolves to an HttpResponse, whether the peer answered 2xx, answered
4xx/5xx, or was never reached. Callers branch on ``status``/``data``/``error``
instead of catching exceptions.

Flow:
    verb method -> _request -> try_catch(transport.request(...)) -> build_response

Failure mapping (build_response):
    - status: the failure's own ``status``, else the nested response's
      status, else the fallback sentinel (500 unless configured)
    - headers: the nested response's headers, else {}
    - data: never populated
    - error: the original failure object

Usage:
    async with HttpClient("https://jsonplaceholder.typicode.com") as client:
        response = await client.get("/posts/1")
        if response.error is None:
            print(response.data["title"])
"""

from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any, Self, TypeVar

from uniform_http.core.config import get_settings
from uniform_http.core.container import get_logger
from uniform_http.core.result import Failure, Result, Success, try_catch
from uniform_http.domain.enums import HttpMethod
from uniform_http.domain.protocols import LoggerProtocol, TransportProtocol
from uniform_http.domain.value_objects import (
    HttpRequest,
    HttpResponse,
    QueryValue,
    TransportResponse,
)
from uniform_http.infrastructure.http import HttpxTransport, TransportOptions

TBody = TypeVar("TBody")

type TransportFactory = Callable[[str, TransportOptions | None], TransportProtocol]
"""Builds the transport a facade owns from its base URL and options."""


class HttpClient:
    """Uniform request/response facade over one transport.

    Attributes:
        _base_url: Base URL the transport resolves relative URLs against.
        _transport: Transport owned by this facade (never shared).
        _fallback_status: Status reported for failures without one.
        _logger: Logger bound with the base URL.

    Example:
        >>> client = HttpClient(
        ...     "https://api.example.com",
        ...     TransportOptions(headers={"Accept": "application/json"}),
        ... )
        >>> created = await client.post("/users", {"name": "John"})
        >>> created.status
        201
    """

    def __init__(
        self,
        base_url: str,
        options: TransportOptions | None = None,
        *,
        fallback_status: int | None = None,
        transport_factory: TransportFactory = HttpxTransport.create,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Create the facade and its transport.

        Args:
            base_url: Base URL for all requests.
            options: Transport options, fixed for the facade's lifetime.
            fallback_status: Status for failures carrying no status. Defaults
                to the ``http_fallback_status`` setting (500).
            transport_factory: Builds the transport from base URL and options.
            logger: Logger; defaults to the container logger.
        """
        self._base_url = base_url
        self._fallback_status = (
            fallback_status
            if fallback_status is not None
            else get_settings().http_fallback_status
        )
        self._transport = transport_factory(base_url, options)
        self._logger = (logger or get_logger()).bind(base_url=base_url)
        self._closed = False
        self._logger.info(
            "http_client_created",
            fallback_status=self._fallback_status,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def fallback_status(self) -> int:
        return self._fallback_status

    @property
    def closed(self) -> bool:
        return self._closed

    async def get(
        self,
        url: str,
        params: dict[str, QueryValue] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse[Any]:
        """Send a GET request."""
        return await self._request(
            HttpRequest(method=HttpMethod.GET, url=url, params=params, headers=headers)
        )

    async def post(
        self,
        url: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse[Any]:
        """Send a POST request with an optional body."""
        return await self._request(
            HttpRequest(method=HttpMethod.POST, url=url, body=body, headers=headers)
        )

    async def put(
        self,
        url: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse[Any]:
        """Send a PUT request with an optional body."""
        return await self._request(
            HttpRequest(method=HttpMethod.PUT, url=url, body=body, headers=headers)
        )

    async def patch(
        self,
        url: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse[Any]:
        """Send a PATCH request with an optional body."""
        return await self._request(
            HttpRequest(method=HttpMethod.PATCH, url=url, body=body, headers=headers)
        )

    async def delete(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse[Any]:
        """Send a DELETE request."""
        return await self._request(
            HttpRequest(method=HttpMethod.DELETE, url=url, headers=headers)
        )

    async def _request(self, request: HttpRequest[Any]) -> HttpResponse[Any]:
        """Perform a request and map its outcome. Never raises.

        Args:
            request: Call description.

        Returns:
            HttpResponse for either outcome.
        """
        method, url = request.method, request.url
        headers, params, body = request.headers, request.params, request.body

        outcome: Result[TransportResponse[Any], Exception] = await try_catch(
            self._transport.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                data=body,
            )
        )
        return build_response(outcome, fallback_status=self._fallback_status)

    async def aclose(self) -> None:
        """Close the transport. Safe to call more than once.

        The client only reports ``closed`` once the transport closed
        successfully; a failed close can be retried.
        """
        if self._closed:
            return
        await self._transport.aclose()
        self._closed = True
        self._logger.info("http_client_closed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()


def build_response(
    outcome: Result[TransportResponse[TBody], Exception],
    *,
    fallback_status: int,
) -> HttpResponse[TBody]:
    """Map a wrapped transport outcome to an HttpResponse.

    Pure: the same outcome always maps to an equal response.

    Args:
        outcome: Success with the resolved TransportResponse, or Failure with
            the exception the transport raised.
        fallback_status: Status used when the failure carries none.

    Returns:
        HttpResponse following the success or failure invariants.
    """
    match outcome:
        case Success(value=resolved):
            return HttpResponse(
                status=resolved.status,
                headers=dict(resolved.headers),
                data=resolved.data,
            )
        case Failure(error=error):
            nested = getattr(error, "response", None)
            return HttpResponse(
                status=_failure_status(error, nested, fallback_status),
                headers=_failure_headers(nested),
                error=error,
            )
    raise TypeError(f"Expected Success or Failure, got {type(outcome).__name__}")


def _failure_status(error: Exception, nested: Any, fallback_status: int) -> int:
    """Status of the failure itself, else of its nested response, else the fallback."""
    for candidate in (
        getattr(error, "status", None),
        getattr(nested, "status", None),
        getattr(nested, "status_code", None),
    ):
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return candidate
    return fallback_status


def _failure_headers(nested: Any) -> dict[str, str]:
    headers = getattr(nested, "headers", None)
    if isinstance(headers, Mapping):
        return dict(headers)
    return {}
