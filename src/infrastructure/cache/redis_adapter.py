"""Redis-backed CacheProtocol.

Every Redis or codec failure on the read and write paths becomes a
``CacheError`` inside a ``Failure``; the query handlers decide what a cache
failure means for the request. Deletions are best-effort and only log.
TTLs are given in minutes.
"""

from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

from redis.asyncio import Redis

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

T = TypeVar("T")


def _cache_failure(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    exc: Exception,
    *,
    code: ErrorCode = ErrorCode.CACHE_UNAVAILABLE,
    **details: Any,
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=code,
            infrastructure_code=infrastructure_code,
            message=message,
            details={**details, "error": str(exc), "type": type(exc).__name__},
        )
    )


class RedisAdapter:
    """Cache adapter over an async ``redis.asyncio.Redis`` client."""

    def __init__(self, redis_client: Redis, logger: LoggerProtocol) -> None:
        self._redis = redis_client
        self._logger = logger

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Raw string stored under ``key``, or None on a miss."""
        try:
            raw = await self._redis.get(key)
        except Exception as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"cache read failed for '{key}'",
                e,
                key=key,
            )
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                return _cache_failure(
                    InfrastructureErrorCode.CACHE_DECODE_ERROR,
                    f"cached value for '{key}' is not UTF-8 text",
                    e,
                    code=ErrorCode.CACHE_CORRUPTED,
                    key=key,
                )
        return Success(value=raw)

    async def get_as(
        self,
        key: str,
        decode: Callable[[str], T],
    ) -> Result[T | None, CacheError]:
        """Read ``key`` and run ``decode`` on a hit.

        A value that fails to decode is reported as CACHE_CORRUPTED rather
        than treated as a miss.
        """
        result = await self.get(key)
        if isinstance(result, Failure):
            return result
        if result.value is None:
            return Success(value=None)
        try:
            return Success(value=decode(result.value))
        except Exception as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_DECODE_ERROR,
                f"cached value for '{key}' could not be decoded",
                e,
                code=ErrorCode.CACHE_CORRUPTED,
                key=key,
            )

    async def set(
        self,
        key: str,
        value: str,
        ttl_minutes: int,
    ) -> Result[None, CacheError]:
        """Store ``value`` with an expiry, replacing any previous entry."""
        try:
            await self._redis.setex(key, timedelta(minutes=ttl_minutes), value)
        except Exception as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"cache write failed for '{key}'",
                e,
                key=key,
                ttl_minutes=ttl_minutes,
            )
        return Success(value=None)

    async def set_as(
        self,
        key: str,
        value: T,
        encode: Callable[[T], str | bytes],
        ttl_minutes: int,
    ) -> Result[None, CacheError]:
        try:
            encoded = encode(value)
        except Exception as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_ENCODE_ERROR,
                f"value for '{key}' could not be encoded",
                e,
                key=key,
            )
        if isinstance(encoded, bytes):
            encoded = encoded.decode("utf-8")
        return await self.set(key, encoded, ttl_minutes)

    async def delete(self, key: str) -> bool:
        """True when ``key`` existed and was removed. Never raises."""
        try:
            return await self._redis.delete(key) > 0
        except Exception as e:
            self._logger.warning(
                "cache delete failed",
                key=key,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    async def delete_pattern(self, pattern: str) -> int:
        """Remove keys matching a glob such as ``trx_list:*``.

        Keys are collected with SCAN, not KEYS. Returns the number removed,
        0 on failure.
        """
        try:
            matched = [key async for key in self._redis.scan_iter(match=pattern)]
            return int(await self._redis.delete(*matched)) if matched else 0
        except Exception as e:
            self._logger.warning(
                "cache pattern delete failed",
                pattern=pattern,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return 0

    async def ping(self) -> Result[bool, CacheError]:
        try:
            await self._redis.ping()  # type: ignore[misc]
        except Exception as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "redis ping failed",
                e,
            )
        return Success(value=True)

    async def close(self) -> None:
        await self._redis.aclose()
