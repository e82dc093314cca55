"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (cache).

Architecture:
- Infrastructure catches exceptions and maps them to error dataclasses
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode records which operation failed

Database failures are not wrapped: repositories let SQLAlchemyError
propagate, and the access log writer maps them to AuditError.
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Operation-level error code.
        details: Additional context (key, original error).
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors.

    Wraps Redis exceptions and decode failures of stored values.
    """

    pass
