"""HistoricalTransactionRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture. Maps database rows of
``historical_transactions`` to domain HistoricalTransaction entities.

Reference:
    - src/domain/protocols/transaction_repository.py
    - src/domain/entities/historical_transaction.py
"""

from collections.abc import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.historical_transaction import HistoricalTransaction
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.transaction_status import TransactionStatus
from src.domain.enums.transaction_type import TransactionType
from src.infrastructure.persistence.models.historical_transaction import (
    HistoricalTransactionModel,
)


class HistoricalTransactionRepository:
    """SQLAlchemy implementation of HistoricalTransactionRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    Database errors are not caught here; they propagate as SQLAlchemyError.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = HistoricalTransactionRepository(session)
        ...     total = await repo.count()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def list_recent(
        self,
        limit: int,
        offset: int,
    ) -> AsyncIterator[HistoricalTransaction]:
        """Stream ledger entries ordered by created_at DESC.

        Args:
            limit: Maximum number of rows.
            offset: Number of rows to skip.

        Yields:
            Domain entities in newest-first order.
        """
        stmt = (
            select(HistoricalTransactionModel)
            .order_by(HistoricalTransactionModel.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.stream_scalars(stmt)
        async for model in result:
            yield self._to_domain(model)

    async def find_by_id(self, transaction_id: str) -> HistoricalTransaction | None:
        """Find ledger entry by primary key.

        Args:
            transaction_id: Row identifier.

        Returns:
            Domain entity if found, None otherwise.
        """
        stmt = select(HistoricalTransactionModel).where(
            HistoricalTransactionModel.id == transaction_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def count(self) -> int:
        """Count all ledger entries."""
        stmt = select(func.count()).select_from(HistoricalTransactionModel)
        total = await self.session.scalar(stmt)
        return int(total or 0)

    def _to_domain(self, model: HistoricalTransactionModel) -> HistoricalTransaction:
        """Convert database model to domain entity.

        Converts enum strings back to domain enums.
        """
        payment_method: PaymentMethod | None = None
        if model.payment_method is not None:
            payment_method = PaymentMethod(model.payment_method)

        return HistoricalTransaction(
            id=model.id,
            user_id=model.user_id,
            account_id=model.account_id,
            transaction_id=model.transaction_id,
            transaction_type=TransactionType(model.transaction_type),
            transaction_status=TransactionStatus(model.transaction_status),
            amount=model.amount,
            balance_before=model.balance_before,
            balance_after=model.balance_after,
            currency=model.currency,
            description=model.description,
            external_reference=model.external_reference,
            payment_method=payment_method,
            metadata=model.metadata_,
            is_accessible_external=model.is_accessible_external,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
