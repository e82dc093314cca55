"""Centralized constants for internal implementation details.

Environment-specific configuration belongs in ``src/core/config.py``. The
cache TTL defaults below are the fallbacks Settings uses when no override is
provided.

Example:
    >>> from src.core.constants import TRANSACTION_LIST_TTL_MINUTES
    >>> await cache.set(key, payload, ttl_minutes=TRANSACTION_LIST_TTL_MINUTES)
"""

# =============================================================================
# Cache TTLs (minutes)
# =============================================================================

TRANSACTION_LIST_TTL_MINUTES: int = 15
"""Lifetime of a cached page of transaction summaries."""

TRANSACTION_SINGLE_TTL_MINUTES: int = 30
"""Lifetime of a cached single transaction."""

TRANSACTION_COUNT_TTL_MINUTES: int = 5
"""Lifetime of the cached total transaction count."""


# =============================================================================
# Pagination
# =============================================================================

DEFAULT_PAGE: int = 1
"""Page served when the caller omits ``page``."""

DEFAULT_PAGE_SIZE: int = 10
"""Page size served when the caller omits ``size``."""


# =============================================================================
# Audit endpoints
# =============================================================================

TRANSACTIONS_AUDIT_ENDPOINT: str = "/api/transactions"
"""Endpoint recorded in the access log for list reads.

Single reads append ``/<transaction_id>``.
"""


# =============================================================================
# Error messages
# =============================================================================

INTERNAL_SERVER_ERROR_MESSAGE: str = "internal server error"
"""Client-facing message for every unexpected failure."""
