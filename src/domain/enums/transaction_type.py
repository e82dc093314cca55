"""Transaction type enumeration.

Stored as the upper-case member name in ``historical_transactions.transaction_type``.
"""

from enum import Enum


class TransactionType(str, Enum):
    """Kind of money movement recorded in the ledger."""

    TOPUP = "TOPUP"
    """Funds added to the wallet."""

    PAYMENT = "PAYMENT"
    """Funds spent at a merchant."""

    REFUND = "REFUND"
    """Funds returned from a previous payment."""

    TRANSFER = "TRANSFER"
    """Funds moved between accounts."""
