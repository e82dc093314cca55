"""Queries - Read operations that fetch data.

Each query has a corresponding handler. Queries NEVER change ledger state;
the only side effects are cache population and the access log.
"""

from src.application.queries.transaction_queries import (
    GetTransactionById,
    GetTransactionCount,
    GetTransactions,
)

__all__ = [
    "GetTransactionById",
    "GetTransactionCount",
    "GetTransactions",
]
