"""Data Transfer Objects (DTOs) for the application layer.

DTOs are result dataclasses returned by query handlers.
"""

from src.application.dtos.transaction_dtos import (
    COUNT_CODEC,
    TRANSACTION_CODEC,
    TRANSACTION_LIST_CODEC,
    CallerContext,
    TransactionResp,
)

__all__ = [
    "COUNT_CODEC",
    "TRANSACTION_CODEC",
    "TRANSACTION_LIST_CODEC",
    "CallerContext",
    "TransactionResp",
]
