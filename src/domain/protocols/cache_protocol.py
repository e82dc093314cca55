"""Cache port used by the transaction query handlers.

Values are stored as UTF-8 JSON text with a lifetime in minutes. Reads and
writes report failures as ``Failure``; deletions never fail and answer
False / 0 instead.
"""

from collections.abc import Callable
from typing import Protocol, TypeVar

from src.core.errors import DomainError
from src.core.result import Result

T = TypeVar("T")


class CacheProtocol(Protocol):
    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Success(None) on a miss, Success(text) on a hit."""
        ...

    async def get_as(
        self,
        key: str,
        decode: Callable[[str], T],
    ) -> Result[T | None, DomainError]:
        """Read and decode in one step.

        An exception from ``decode`` means the entry is corrupt and comes
        back as a Failure, not as a miss.

        Example:
            result = await cache.get_as(key, TRANSACTION_LIST_CODEC.validate_json)
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl_minutes: int,
    ) -> Result[None, DomainError]: ...

    async def set_as(
        self,
        key: str,
        value: T,
        encode: Callable[[T], str | bytes],
        ttl_minutes: int,
    ) -> Result[None, DomainError]:
        """Encode with ``encode`` (the counterpart of the read decoder) and store."""
        ...

    async def delete(self, key: str) -> bool: ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching a glob; returns how many were removed."""
        ...

    async def ping(self) -> Result[bool, DomainError]: ...

    async def close(self) -> None: ...
