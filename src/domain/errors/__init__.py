"""Domain errors package.

Usage:
    from src.domain.errors import AuditError
"""

from src.domain.errors.audit_error import AuditError

__all__ = ["AuditError"]
