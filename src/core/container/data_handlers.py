"""Transaction handler dependency factories.

Request-scoped query handler instances wired with the app-scoped cache and
logger and the request-scoped repositories. TTLs come from settings.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import get_cache, get_logger
from src.core.container.repositories import (
    get_access_log_repository,
    get_transaction_repository,
)

if TYPE_CHECKING:
    from src.application.queries.handlers.get_transaction_count_handler import (
        GetTransactionCountHandler,
    )
    from src.application.queries.handlers.get_transaction_handler import (
        GetTransactionHandler,
    )
    from src.application.queries.handlers.list_transactions_handler import (
        ListTransactionsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        ApiAccessLogRepository,
        HistoricalTransactionRepository,
    )


async def get_list_transactions_handler(
    transaction_repo: "HistoricalTransactionRepository" = Depends(
        get_transaction_repository
    ),
    access_log_repo: "ApiAccessLogRepository" = Depends(get_access_log_repository),
) -> "ListTransactionsHandler":
    """Get ListTransactions query handler (request-scoped)."""
    from src.application.queries.handlers.list_transactions_handler import (
        ListTransactionsHandler,
    )

    return ListTransactionsHandler(
        transaction_repo=transaction_repo,
        cache=get_cache(),
        access_log_repo=access_log_repo,
        logger=get_logger(),
        ttl_minutes=settings.cache_ttl_list_minutes,
    )


async def get_get_transaction_handler(
    transaction_repo: "HistoricalTransactionRepository" = Depends(
        get_transaction_repository
    ),
    access_log_repo: "ApiAccessLogRepository" = Depends(get_access_log_repository),
) -> "GetTransactionHandler":
    """Get GetTransaction query handler (request-scoped)."""
    from src.application.queries.handlers.get_transaction_handler import (
        GetTransactionHandler,
    )

    return GetTransactionHandler(
        transaction_repo=transaction_repo,
        cache=get_cache(),
        access_log_repo=access_log_repo,
        logger=get_logger(),
        ttl_minutes=settings.cache_ttl_single_minutes,
    )


async def get_get_transaction_count_handler(
    transaction_repo: "HistoricalTransactionRepository" = Depends(
        get_transaction_repository
    ),
) -> "GetTransactionCountHandler":
    """Get GetTransactionCount query handler (request-scoped)."""
    from src.application.queries.handlers.get_transaction_count_handler import (
        GetTransactionCountHandler,
    )

    return GetTransactionCountHandler(
        transaction_repo=transaction_repo,
        cache=get_cache(),
        logger=get_logger(),
        ttl_minutes=settings.cache_ttl_count_minutes,
    )
