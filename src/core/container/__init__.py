"""Dependency factories wired into FastAPI with ``Depends``.

    from src.core.container import get_list_transactions_handler
"""

from src.core.container.data_handlers import (
    get_get_transaction_count_handler,
    get_get_transaction_handler,
    get_list_transactions_handler,
)
from src.core.container.infrastructure import (
    get_audit_session,
    get_cache,
    get_database,
    get_db_session,
    get_logger,
)
from src.core.container.repositories import (
    get_access_log_repository,
    get_transaction_repository,
)

__all__ = [
    "get_access_log_repository",
    "get_audit_session",
    "get_cache",
    "get_database",
    "get_db_session",
    "get_get_transaction_count_handler",
    "get_get_transaction_handler",
    "get_list_transactions_handler",
    "get_logger",
    "get_transaction_repository",
]
