"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import CacheProtocol, HistoricalTransactionRepository
"""

from src.domain.protocols.api_access_log_repository import ApiAccessLogRepository
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transaction_repository import (
    HistoricalTransactionRepository,
)

__all__ = [
    "ApiAccessLogRepository",
    "CacheProtocol",
    "HistoricalTransactionRepository",
    "LoggerProtocol",
]
