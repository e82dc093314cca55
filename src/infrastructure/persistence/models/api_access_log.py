"""API access log database model.

Append-only table recording every successful external read.

Architecture:
    - Inherits BaseModel (no updated_at, rows never change)
    - http_method uses the PostgreSQL enum type ``http_method_enum``
"""

from sqlalchemy import Enum as SAEnum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums.http_method import HttpMethod
from src.infrastructure.persistence.base import BaseModel

http_method_enum = SAEnum(
    HttpMethod,
    name="http_method_enum",
    values_callable=lambda members: [member.value for member in members],
)


class ApiAccessLogModel(BaseModel):
    """Access log row.

    Fields:
        id: String primary key (from BaseModel)
        created_at: When the access was recorded (from BaseModel)
        external_service_id: Caller identity
        api_key_id: API key presented by the caller
        endpoint: Logical endpoint read
        http_method: HTTP verb
        ip_address: Caller address
        user_agent: Caller User-Agent
        response_status: HTTP status returned
    """

    __tablename__ = "api_access_logs"

    external_service_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    api_key_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    endpoint: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    http_method: Mapped[HttpMethod] = mapped_column(
        http_method_enum,
        nullable=False,
    )

    ip_address: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )

    user_agent: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    response_status: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    __table_args__ = (
        Index("ix_api_access_logs_external_service_id", "external_service_id"),
        Index("ix_api_access_logs_created_at", "created_at"),
    )
