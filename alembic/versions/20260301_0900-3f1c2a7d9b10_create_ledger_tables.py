"""create_ledger_tables

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-03-01 09:00:12.118204+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

http_method_enum = postgresql.ENUM(
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    name="http_method_enum",
    create_type=False,
)


def upgrade() -> None:
    """Create historical_transactions and api_access_logs tables."""
    op.create_table(
        "historical_transactions",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "user_id", sa.BigInteger(), nullable=False, comment="Owner of the account"
        ),
        sa.Column(
            "account_id",
            sa.String(length=64),
            nullable=False,
            comment="Account the entry was booked against",
        ),
        sa.Column(
            "transaction_id",
            sa.String(length=64),
            nullable=False,
            comment="External transaction identifier",
        ),
        sa.Column(
            "transaction_type",
            sa.String(length=20),
            nullable=False,
            comment="TOPUP, PAYMENT, REFUND, TRANSFER",
        ),
        sa.Column(
            "transaction_status",
            sa.String(length=20),
            nullable=False,
            comment="PENDING, SUCCESS, FAILED, CANCELLED",
        ),
        # Money columns
        sa.Column("amount", sa.Numeric(precision=19, scale=2), nullable=False),
        sa.Column("balance_before", sa.Numeric(precision=19, scale=2), nullable=False),
        sa.Column("balance_after", sa.Numeric(precision=19, scale=2), nullable=False),
        sa.Column(
            "currency",
            sa.String(length=3),
            nullable=False,
            comment="ISO 4217 currency code",
        ),
        # Optional details
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column(
            "external_reference",
            sa.String(length=255),
            nullable=True,
            comment="Reference issued by a partner system",
        ),
        sa.Column(
            "payment_method",
            sa.String(length=20),
            nullable=True,
            comment="GOPAY, SHOPEE_PAY",
        ),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column(
            "is_accessible_external",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_historical_transactions_created_at",
        "historical_transactions",
        ["created_at"],
    )
    op.create_index(
        "ix_historical_transactions_transaction_id",
        "historical_transactions",
        ["transaction_id"],
    )

    http_method_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "api_access_logs",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("external_service_id", sa.String(length=255), nullable=False),
        sa.Column("api_key_id", sa.String(length=255), nullable=False),
        sa.Column("endpoint", sa.String(length=255), nullable=False),
        sa.Column("http_method", http_method_enum, nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=False),
        sa.Column("user_agent", sa.Text(), nullable=False),
        sa.Column("response_status", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_api_access_logs_external_service_id",
        "api_access_logs",
        ["external_service_id"],
    )
    op.create_index("ix_api_access_logs_created_at", "api_access_logs", ["created_at"])


def downgrade() -> None:
    """Drop ledger tables and the http_method enum type."""
    op.drop_index("ix_api_access_logs_created_at", table_name="api_access_logs")
    op.drop_index(
        "ix_api_access_logs_external_service_id", table_name="api_access_logs"
    )
    op.drop_table("api_access_logs")
    http_method_enum.drop(op.get_bind(), checkfirst=True)

    op.drop_index(
        "ix_historical_transactions_transaction_id",
        table_name="historical_transactions",
    )
    op.drop_index(
        "ix_historical_transactions_created_at", table_name="historical_transactions"
    )
    op.drop_table("historical_transactions")
