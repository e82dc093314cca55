"""Common error classes shared across layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input, if a single one is to blame.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Kind of resource looked up (e.g. "HistoricalTransaction").
        resource_id: Identifier that produced no match.
    """

    resource_type: str
    resource_id: str
