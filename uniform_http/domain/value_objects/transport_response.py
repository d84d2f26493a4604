"""TransportResponse value object.

What the transport resolves with on success, and what it attaches to a
status failure as the nested response.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

TBody = TypeVar("TBody")


@dataclass(frozen=True, eq=True, unsafe_hash=False, slots=True, kw_only=True)
class TransportResponse(Generic[TBody]):
    """Response as returned by the remote peer.

    Attributes:
        status: HTTP status code.
        headers: Response headers, names lower-cased.
        data: Decoded body (``None`` when the body was empty).

    Not hashable: headers and data are mutable containers.
    """

    __hash__ = None  # type: ignore[assignment]

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    data: TBody | None = None
