"""Historical transaction database model.

Maps the ``historical_transactions`` ledger table. Rows are written by
upstream systems; this service only reads them.

Architecture:
    - String primary key shared with upstream systems
    - Amounts and balances stored as NUMERIC(19, 2)
    - Enums stored as upper-case strings: transaction_type,
      transaction_status, payment_method
    - Opaque metadata kept as text

Reference:
    - src/domain/entities/historical_transaction.py
"""

from decimal import Decimal

from sqlalchemy import BigInteger, Boolean, Index, Numeric, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class HistoricalTransactionModel(BaseMutableModel):
    """Ledger entry row.

    Fields:
        id: String primary key (from BaseMutableModel)
        created_at: Booking timestamp (from BaseMutableModel)
        updated_at: Last modification (from BaseMutableModel)
        user_id: Owner of the account
        account_id: Account the entry was booked against
        transaction_id: External transaction identifier
        transaction_type: TOPUP, PAYMENT, REFUND, TRANSFER
        transaction_status: PENDING, SUCCESS, FAILED, CANCELLED
        amount / balance_before / balance_after: Money columns
        currency: ISO currency code
        description, external_reference, payment_method, metadata: Optional
        is_accessible_external: Visibility to external services

    Indexes:
        - ix_historical_transactions_created_at: Newest-first listing
        - ix_historical_transactions_transaction_id: External id lookup
    """

    __tablename__ = "historical_transactions"

    user_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Owner of the account",
    )

    account_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Account the entry was booked against",
    )

    transaction_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="External transaction identifier",
    )

    transaction_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="TOPUP, PAYMENT, REFUND, TRANSFER",
    )

    transaction_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="PENDING, SUCCESS, FAILED, CANCELLED",
    )

    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
    )

    balance_before: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
    )

    balance_after: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="IDR",
        comment="ISO 4217 currency code",
    )

    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
    )

    external_reference: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Reference issued by a partner system",
    )

    payment_method: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="GOPAY, SHOPEE_PAY",
    )

    # "metadata" is reserved on declarative classes
    metadata_: Mapped[str | None] = mapped_column(
        "metadata",
        Text,
        nullable=True,
    )

    is_accessible_external: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        Index("ix_historical_transactions_created_at", "created_at"),
        Index("ix_historical_transactions_transaction_id", "transaction_id"),
    )
