"""Domain enums.

Usage:
    from src.domain.enums import TransactionStatus, HttpMethod
"""

from src.domain.enums.http_method import HttpMethod
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.transaction_status import TransactionStatus
from src.domain.enums.transaction_type import TransactionType

__all__ = [
    "HttpMethod",
    "PaymentMethod",
    "TransactionStatus",
    "TransactionType",
]
