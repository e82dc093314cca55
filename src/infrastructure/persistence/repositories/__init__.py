"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in the domain
layer.
"""

from src.infrastructure.persistence.repositories.api_access_log_repository import (
    ApiAccessLogRepository,
)
from src.infrastructure.persistence.repositories.transaction_repository import (
    HistoricalTransactionRepository,
)

__all__ = [
    "ApiAccessLogRepository",
    "HistoricalTransactionRepository",
]
