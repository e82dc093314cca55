"""Infrastructure layer errors.

Usage:
    from src.infrastructure.errors import CacheError
"""

from src.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "CacheError",
]
