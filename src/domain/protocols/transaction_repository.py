"""Historical transaction repository protocol.

Read-only access to the ledger.
"""

from collections.abc import AsyncIterator
from typing import Protocol

from src.domain.entities.historical_transaction import HistoricalTransaction


class HistoricalTransactionRepository(Protocol):
    """Protocol for reading ledger entries.

    **Design Principles**:
    - Returns domain entities, never database models
    - No write methods (the ledger is owned upstream)
    - Storage failures propagate as exceptions
    """

    def list_recent(
        self,
        limit: int,
        offset: int,
    ) -> AsyncIterator[HistoricalTransaction]:
        """Stream entries, newest first.

        Each call issues a fresh query. Rows are yielded as they arrive.

        Args:
            limit: Maximum rows to return.
            offset: Rows to skip.

        Example:
            >>> async for transaction in repo.list_recent(limit=10, offset=0):
            ...     print(transaction.transaction_id)
        """
        ...

    async def find_by_id(self, transaction_id: str) -> HistoricalTransaction | None:
        """Find an entry by primary key.

        Returns:
            The entity, or None if no row matches.
        """
        ...

    async def count(self) -> int:
        """Count all ledger entries."""
        ...
