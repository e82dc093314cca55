"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
bound to its sessions.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_audit_session, get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        ApiAccessLogRepository,
        HistoricalTransactionRepository,
    )


async def get_transaction_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "HistoricalTransactionRepository":
    """Get ledger repository (request-scoped).

    Args:
        session: Database session for request duration.
    """
    from src.infrastructure.persistence.repositories import (
        HistoricalTransactionRepository,
    )

    return HistoricalTransactionRepository(session=session)


async def get_access_log_repository(
    audit_session: AsyncSession = Depends(get_audit_session),
) -> "ApiAccessLogRepository":
    """Get access log writer (request-scoped with separate session).

    Uses get_audit_session() (NOT get_db_session()) so every write commits
    on its own.

    Args:
        audit_session: Independent database session for audit writes.
    """
    from src.infrastructure.persistence.repositories import ApiAccessLogRepository

    return ApiAccessLogRepository(session=audit_session)
