"""PostgreSQL persistence: declarative base, engine and repositories.

Usage:
    from src.infrastructure.persistence import BaseModel, Database
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
