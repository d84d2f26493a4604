"""HttpRequest value object.

Describes one outgoing call. Optional fields default to ``None``, which means
"omit from the outgoing call"; an empty mapping is sent as an empty mapping.

Usage:
    from uniform_http.domain.value_objects import HttpRequest

    request = HttpRequest(
        method=HttpMethod.GET,
        url="/posts",
        params={"userId": 1},
    )
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from uniform_http.domain.enums import HttpMethod

TBody = TypeVar("TBody")

type QueryValue = str | int | float | bool
"""Primitive types accepted as query-parameter values."""


@dataclass(frozen=True, eq=True, unsafe_hash=False, slots=True, kw_only=True)
class HttpRequest(Generic[TBody]):
    """Immutable description of a single HTTP call.

    Attributes:
        method: HTTP method.
        url: URL, usually relative to the facade's base URL.
        headers: Per-call headers, merged over the transport defaults.
        params: Query parameters.
        body: Request body (encoded by the transport).

    Not hashable: headers, params and body may be mutable containers.
    """

    __hash__ = None  # type: ignore[assignment]

    method: HttpMethod
    url: str
    headers: dict[str, str] | None = None
    params: dict[str, QueryValue] | None = None
    body: TBody | None = None
