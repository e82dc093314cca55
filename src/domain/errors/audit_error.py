"""Audit log error types.

Returned (never raised) when an access record cannot be persisted.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Access log write failure.

    Attributes:
        code: ErrorCode.AUDIT_RECORD_FAILED.
        message: Human-readable message.
        details: Endpoint and error type of the failed write.
    """

    pass
