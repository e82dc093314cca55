"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented programming
- Base error classes
- Settings and constants

The core package has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
