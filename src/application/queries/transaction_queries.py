"""Transaction queries for CQRS read operations.

Queries are immutable requests for ledger data. Handlers perform the actual
retrieval, caching and auditing.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
"""

from dataclasses import dataclass

from src.application.dtos.transaction_dtos import CallerContext
from src.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


@dataclass(frozen=True, kw_only=True)
class GetTransactions:
    """Query for one page of transaction summaries, newest first.

    Attributes:
        caller: External caller, recorded in the access log.
        page: 1-based page number.
        size: Page size.

    Example:
        >>> query = GetTransactions(caller=caller, page=2, size=20)
        >>> result = await handler.handle(query)
    """

    caller: CallerContext
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, kw_only=True)
class GetTransactionById:
    """Query for a single ledger entry.

    Attributes:
        id: Ledger row identifier.
        caller: External caller, recorded in the access log.
        transaction_id: Identifier recorded in the audited endpoint path.
    """

    id: str
    caller: CallerContext
    transaction_id: str


@dataclass(frozen=True, kw_only=True)
class GetTransactionCount:
    """Query for the total number of ledger entries."""
