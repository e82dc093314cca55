"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising, which keeps
the failure path explicit at every call site.

Usage:
    result = await cache.get(transaction_key(transaction_id))
    match result:
        case Success(value=None):
            ...  # cache miss
        case Success(value=raw):
            ...  # cache hit
        case Failure(error=error):
            ...  # cache unavailable
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
