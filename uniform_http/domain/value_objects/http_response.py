"""HttpResponse value object.

The single shape every facade call returns, whatever happened on the wire.

Invariants:
    - Success: ``error`` is None; ``status``, ``headers`` and ``data`` are the
      transport's resolved values.
    - Failure: ``data`` is None; ``status`` and ``headers`` are salvaged from
      the failure; ``error`` is the original exception object.

Usage:
    response = await client.get("/posts/1")
    if response.ok:
        print(response.data["title"])
    else:
        print(response.status, type(response.error).__name__)
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

TBody = TypeVar("TBody")


@dataclass(frozen=True, eq=True, unsafe_hash=False, slots=True, kw_only=True)
class HttpResponse(Generic[TBody]):
    """Uniform response returned by HttpClient.

    Attributes:
        status: HTTP status, or the fallback sentinel when none was available.
        headers: Response headers (empty when none were available).
        data: Decoded body on success, always None on failure.
        error: Original failure object, None on success.

    Instances compare by value but are not hashable: headers and data are
    mutable containers.
    """

    __hash__ = None  # type: ignore[assignment]

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    data: TBody | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True when the call completed without a failure."""
        return self.error is None
