"""Cache key construction for transaction reads.

Key formats are shared with other consumers of the same Redis instance and
must not change:

- ``trx_list:{page}:{size}``: one page of transaction summaries
- ``trx:{id}``: a single transaction
- ``trx_count``: total number of transactions

Usage:
    from src.infrastructure.cache.cache_keys import CacheKeys

    key = CacheKeys.transaction_list(page=1, size=10)  # "trx_list:1:10"
"""


class CacheKeys:
    """Centralized cache key construction for transaction data."""

    TRANSACTION_COUNT = "trx_count"
    TRANSACTION_LIST_PATTERN = "trx_list:*"

    @staticmethod
    def transaction_list(page: int, size: int) -> str:
        """Key for one page of transaction summaries.

        Example:
            "trx_list:3:5"
        """
        return f"trx_list:{page}:{size}"

    @staticmethod
    def transaction(transaction_id: str) -> str:
        """Key for a single transaction.

        Example:
            "trx:0b8f7e0c-4a1d-4c2e-9d1f-2f6a4c8b9e10"
        """
        return f"trx:{transaction_id}"
