"""Historical transaction domain entity.

Represents one settled or in-flight entry of the ledger. The ledger is
populated by upstream systems; this service only reads it.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.transaction_status import TransactionStatus
from src.domain.enums.transaction_type import TransactionType


@dataclass(frozen=True, kw_only=True)
class HistoricalTransaction:
    """Ledger entry entity.

    Immutable: the service never modifies a transaction, it only reads and
    caches it.

    Attributes:
        id: Primary key of the ledger row.
        user_id: Owner of the account.
        account_id: Account the entry was booked against.
        transaction_id: External transaction identifier.
        transaction_type: TOPUP, PAYMENT, REFUND or TRANSFER.
        transaction_status: Lifecycle state.
        amount: Amount moved.
        balance_before: Account balance before the entry.
        balance_after: Account balance after the entry.
        currency: ISO currency code (e.g. "IDR").
        description: Free-form description.
        external_reference: Reference issued by a partner system.
        payment_method: E-wallet used, when applicable.
        metadata: Opaque payload stored alongside the entry.
        is_accessible_external: Whether external services may see the entry.
        created_at: When the entry was booked.
        updated_at: Last modification of the row.
    """

    id: str
    user_id: int
    account_id: str
    transaction_id: str
    transaction_type: TransactionType
    transaction_status: TransactionStatus
    amount: Decimal
    balance_before: Decimal
    balance_after: Decimal
    currency: str
    description: str | None = None
    external_reference: str | None = None
    payment_method: PaymentMethod | None = None
    metadata: str | None = None
    is_accessible_external: bool = False
    created_at: datetime
    updated_at: datetime

    def is_settled(self) -> bool:
        """Check whether the entry reached SUCCESS."""
        return self.transaction_status == TransactionStatus.SUCCESS
