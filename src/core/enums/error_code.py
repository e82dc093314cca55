"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    # Validation errors
    INVALID_PAGINATION = "invalid_pagination"

    # Resource errors
    TRANSACTION_NOT_FOUND = "transaction_not_found"

    # Infrastructure-facing errors
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_CORRUPTED = "cache_corrupted"

    # Audit trail errors
    AUDIT_RECORD_FAILED = "audit_record_failed"
