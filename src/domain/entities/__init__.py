"""Domain entities.

Usage:
    from src.domain.entities import HistoricalTransaction, ApiAccessLog
"""

from src.domain.entities.api_access_log import ApiAccessLog
from src.domain.entities.historical_transaction import HistoricalTransaction

__all__ = [
    "ApiAccessLog",
    "HistoricalTransaction",
]
