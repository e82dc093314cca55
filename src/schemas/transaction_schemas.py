"""Transaction response schemas.

Pydantic schemas for the transaction history endpoints, with DTO-to-schema
conversion methods. Monetary values are plain ``Decimal`` fields, so they
reach the wire as exact decimal strings (``"15000.50"``) with the stored scale
intact.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from src.application.dtos.transaction_dtos import TransactionResp
from src.domain.entities.historical_transaction import HistoricalTransaction
from src.schemas.common_schemas import CamelModel, MetaResponse, PaginatedMetaResponse

# =============================================================================
# Response Schemas
# =============================================================================


class TransactionSummaryResponse(CamelModel):
    """Transaction summary as returned by the paginated listing."""

    id: str
    user_id: int
    account_id: str
    transaction_id: str
    transaction_status: str
    amount: Decimal = Field(..., description="Transaction amount")
    currency: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: TransactionResp) -> "TransactionSummaryResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            account_id=dto.account_id,
            transaction_id=dto.transaction_id,
            transaction_status=dto.transaction_status.value,
            amount=dto.amount,
            currency=dto.currency,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class TransactionDetailResponse(CamelModel):
    """Full ledger entry."""

    id: str
    user_id: int
    account_id: str
    transaction_id: str
    transaction_type: str
    transaction_status: str
    amount: Decimal = Field(..., description="Transaction amount")
    balance_before: Decimal = Field(..., description="Balance before the entry")
    balance_after: Decimal = Field(..., description="Balance after the entry")
    currency: str
    description: str | None = None
    external_reference: str | None = None
    payment_method: str | None = None
    metadata: str | None = None
    is_accessible_external: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, transaction: HistoricalTransaction
    ) -> "TransactionDetailResponse":
        """Convert domain entity to response schema."""
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            account_id=transaction.account_id,
            transaction_id=transaction.transaction_id,
            transaction_type=transaction.transaction_type.value,
            transaction_status=transaction.transaction_status.value,
            amount=transaction.amount,
            balance_before=transaction.balance_before,
            balance_after=transaction.balance_after,
            currency=transaction.currency,
            description=transaction.description,
            external_reference=transaction.external_reference,
            payment_method=(
                transaction.payment_method.value
                if transaction.payment_method
                else None
            ),
            metadata=transaction.metadata,
            is_accessible_external=transaction.is_accessible_external,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


class TransactionListResponse(CamelModel):
    """Envelope for GET /api/transaction/histories."""

    meta: PaginatedMetaResponse
    data: list[TransactionSummaryResponse] = Field(default_factory=list)


class TransactionResponse(CamelModel):
    """Envelope for GET /api/transaction/histories/{id}."""

    meta: MetaResponse
    data: TransactionDetailResponse
