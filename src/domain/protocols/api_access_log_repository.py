"""API access log repository protocol.

Append-only writer for audit records of external reads.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.api_access_log import ApiAccessLog


class ApiAccessLogRepository(Protocol):
    """Protocol for persisting API access records.

    Records are committed immediately so they survive regardless of what
    happens to the request afterwards.
    """

    async def insert(self, record: ApiAccessLog) -> Result[ApiAccessLog, DomainError]:
        """Persist one access record.

        Missing ``id`` and ``created_at`` are filled in before the write.

        Args:
            record: Access record to store.

        Returns:
            Success with the persisted record (id and created_at set), or
            Failure(AuditError) if the write did not commit.
        """
        ...
