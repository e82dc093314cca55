"""Base model and mixins for the ledger tables.

Provides:
- BaseModel: Base class for ALL models (string id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for rows that change after insert

Following hexagonal architecture, domain entities do NOT inherit from these
classes; repositories map models to entities.

Architecture:
    BaseModel (id, created_at)
        ↑
        ├── BaseMutableModel (+ updated_at via TimestampMixin)
        │   └── HistoricalTransactionModel
        │
        └── ApiAccessLogModel (append-only, no updated_at)

Identifiers are stored as text (UUID strings) because the ledger is shared
with systems that generate their own ids.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def new_id() -> str:
    """Generate a time-ordered identifier string."""
    return str(uuid7())


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: String primary key (uuid7 when generated locally)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at and updated_at with the correct mixin order.
    """

    __abstract__ = True
