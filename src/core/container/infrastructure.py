"""Process-wide infrastructure singletons and per-request sessions.

``lru_cache`` makes each factory return the same instance for the life of
the process; FastAPI calls them through ``Depends``. Tests replace them with
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """JSON lines everywhere except development, which gets console output."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
        service=settings.app_name,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """RedisAdapter over a pooled client shared by all requests."""
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache.redis_adapter import RedisAdapter

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis_max_connections,
        socket_connect_timeout=settings.redis_socket_timeout,
        socket_timeout=settings.redis_socket_timeout,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    return RedisAdapter(  # type: ignore[return-value]
        redis_client=Redis(connection_pool=pool),
        logger=get_logger(),
    )


@lru_cache()
def get_database() -> Database:
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Session for ledger reads, one per request."""
    async with get_database().get_session() as session:
        yield session


async def get_audit_session() -> AsyncGenerator[AsyncSession, None]:
    """Separate session for access log writes.

    The access record commits on its own, independent of the read session.
    """
    async with get_database().get_session() as session:
        yield session
