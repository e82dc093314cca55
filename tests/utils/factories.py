"""Builders for domain objects used across tests."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any

from src.domain.entities.historical_transaction import HistoricalTransaction
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.transaction_status import TransactionStatus
from src.domain.enums.transaction_type import TransactionType

BASE_TIME = datetime(2025, 6, 1, 10, 0, 0, tzinfo=UTC)


def make_transaction(index: int = 1, **overrides: Any) -> HistoricalTransaction:
    """Build a ledger entry; later indexes are newer.

    Args:
        index: Sequence number used for ids and timestamps.
        **overrides: Field values replacing the defaults.
    """
    created_at = BASE_TIME + timedelta(minutes=index)
    values: dict[str, Any] = {
        "id": f"trx-{index:04d}",
        "user_id": 1000 + index,
        "account_id": f"acc-{index:04d}",
        "transaction_id": f"TRX{index:08d}",
        "transaction_type": TransactionType.PAYMENT,
        "transaction_status": TransactionStatus.SUCCESS,
        "amount": Decimal("15000.50"),
        "balance_before": Decimal("100000.00"),
        "balance_after": Decimal("84999.50"),
        "currency": "IDR",
        "description": "Merchant payment",
        "payment_method": PaymentMethod.GOPAY,
        "created_at": created_at,
        "updated_at": created_at,
    }
    values.update(overrides)
    return HistoricalTransaction(**values)
