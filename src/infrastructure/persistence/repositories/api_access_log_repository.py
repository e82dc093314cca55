"""ApiAccessLogRepository - PostgreSQL writer for access audit records.

Append-only: the only operation is INSERT. Each insert commits on its own
session so the record survives whatever happens to the request afterwards.

Usage:
    repo = ApiAccessLogRepository(session)
    result = await repo.insert(
        ApiAccessLog(
            external_service_id="svc-billing",
            api_key_id="key-123",
            endpoint="/api/transactions",
            http_method=HttpMethod.GET,
            ip_address="10.0.0.1",
            user_agent="billing/1.4",
            response_status=200,
        )
    )
"""

from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.api_access_log import ApiAccessLog
from src.domain.errors import AuditError
from src.infrastructure.persistence.base import new_id
from src.infrastructure.persistence.models.api_access_log import ApiAccessLogModel


class ApiAccessLogRepository:
    """PostgreSQL implementation of ApiAccessLogRepository protocol.

    Attributes:
        session: Audit session (separate from the request's business session).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, record: ApiAccessLog) -> Result[ApiAccessLog, AuditError]:
        """Persist one access record and commit immediately.

        Args:
            record: Access record. Missing id and created_at are assigned here.

        Returns:
            Result[ApiAccessLog, AuditError]:
                - Success(record) with id and created_at set
                - Failure(AuditError) if the write did not commit
        """
        persisted = record.with_identity(new_id(), datetime.now(UTC))

        try:
            self.session.add(
                ApiAccessLogModel(
                    id=persisted.id,
                    created_at=persisted.created_at,
                    external_service_id=persisted.external_service_id,
                    api_key_id=persisted.api_key_id,
                    endpoint=persisted.endpoint,
                    http_method=persisted.http_method,
                    ip_address=persisted.ip_address,
                    user_agent=persisted.user_agent,
                    response_status=persisted.response_status,
                )
            )
            await self.session.commit()
            return Success(value=persisted)

        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to record api access log: {e}",
                    details={
                        "endpoint": persisted.endpoint,
                        "error_type": type(e).__name__,
                    },
                )
            )
