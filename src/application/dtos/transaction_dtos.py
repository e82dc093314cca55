"""Transaction DTOs (Data Transfer Objects).

Result dataclasses returned by the transaction query handlers, plus the
JSON codecs used to store them in the cache.

DTOs:
    - TransactionResp: Summary projection used by the paginated listing
    - CallerContext: Identity of the external caller, for audit records

Codecs (pydantic TypeAdapter):
    - TRANSACTION_LIST_CODEC: list[TransactionResp] <-> JSON
    - TRANSACTION_CODEC: HistoricalTransaction <-> JSON
    - COUNT_CODEC: int <-> JSON
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pydantic import TypeAdapter

from src.domain.entities.historical_transaction import HistoricalTransaction
from src.domain.enums.transaction_status import TransactionStatus


@dataclass(frozen=True, kw_only=True)
class TransactionResp:
    """Summary of a ledger entry.

    Attributes:
        id: Ledger row identifier.
        user_id: Owner of the account.
        account_id: Account the entry was booked against.
        transaction_id: External transaction identifier.
        transaction_status: Lifecycle state.
        amount: Amount moved.
        currency: ISO currency code.
        created_at: Booking timestamp.
        updated_at: Last modification.
    """

    id: str
    user_id: int
    account_id: str
    transaction_id: str
    transaction_status: TransactionStatus
    amount: Decimal
    currency: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, transaction: HistoricalTransaction) -> "TransactionResp":
        """Project a full ledger entry to its summary."""
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            account_id=transaction.account_id,
            transaction_id=transaction.transaction_id,
            transaction_status=transaction.transaction_status,
            amount=transaction.amount,
            currency=transaction.currency,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class CallerContext:
    """External caller identity taken from the request.

    Attributes:
        external_service_id: X-Consumer-Custom-ID header.
        api_key_id: X-API-Key header or query parameter.
        ip_address: X-Forwarded-For header.
        user_agent: User-Agent header.
    """

    external_service_id: str
    api_key_id: str
    ip_address: str
    user_agent: str


TRANSACTION_LIST_CODEC: TypeAdapter[list[TransactionResp]] = TypeAdapter(
    list[TransactionResp]
)
TRANSACTION_CODEC: TypeAdapter[HistoricalTransaction] = TypeAdapter(
    HistoricalTransaction
)
COUNT_CODEC: TypeAdapter[int] = TypeAdapter(int)
