"""Database models for the persistence layer.

Models map to database tables and are NOT imported by the domain layer.
Repositories translate them to domain entities.

Models:
    - historical_transaction.py: Ledger entries (read-only here)
    - api_access_log.py: Access audit records (append-only)
"""

from src.infrastructure.persistence.models.api_access_log import ApiAccessLogModel
from src.infrastructure.persistence.models.historical_transaction import (
    HistoricalTransactionModel,
)

__all__ = [
    "ApiAccessLogModel",
    "HistoricalTransactionModel",
]
