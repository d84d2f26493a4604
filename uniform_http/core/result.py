"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

``try_catch`` is the bridge from exception-raising async code into Result
values: it awaits an operation once and hands back either ``Success`` or
``Failure``, never raising for ordinary exceptions.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = await try_catch(client.request("GET", "/users"))
    match result:
        case Success(value=response):
            print(f"Status: {response.status_code}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


async def try_catch(awaitable: Awaitable[T]) -> Result[T, E]:
    """Await an operation and capture its outcome as a Result.

    The awaitable is awaited exactly once. No retry or timeout is applied
    here, and the failure is not interpreted; callers decide what a given
    error means.

    Only ``Exception`` subclasses are captured. ``asyncio.CancelledError``
    and other ``BaseException`` subclasses still propagate.

    Args:
        awaitable: Coroutine or future to await.

    Returns:
        Success(value): The resolved value.
        Failure(error): The exception raised while awaiting.
    """
    try:
        value = await awaitable
    except Exception as e:
        return Failure(error=e)  # type: ignore[arg-type]
    return Success(value=value)
