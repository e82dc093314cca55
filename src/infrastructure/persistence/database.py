"""Async PostgreSQL engine and session factory.

One ``Database`` per process (see ``src.core.container.get_database``). The
ledger is only read here, while the access log is written through its own
session, so every session commits on clean exit and rolls back otherwise.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# asyncpg options; JIT is off because the ledger queries are short lookups
ASYNCPG_CONNECT_ARGS = {
    "server_settings": {"jit": "off"},
    "command_timeout": 60,
    "timeout": 30,
}


class Database:
    """Owns the connection pool and hands out sessions.

    Example:
        >>> db = Database("postgresql+asyncpg://ledger:secret@db/ledger")
        >>> async with db.get_session() as session:
        ...     await session.scalar(text("SELECT 1"))
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
    ) -> None:
        connect_args = (
            ASYNCPG_CONNECT_ARGS if database_url.startswith("postgresql") else {}
        )
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session bound to one unit of work.

        Commits when the block exits normally and rolls back when it raises.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """Run ``SELECT 1``; False if PostgreSQL cannot be reached."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True

    async def close(self) -> None:
        """Dispose of the connection pool on shutdown."""
        await self.engine.dispose()
