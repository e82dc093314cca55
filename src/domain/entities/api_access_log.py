"""API access log entity.

One record per successful external read of transaction data. Records are
append-only.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from src.domain.enums.http_method import HttpMethod


@dataclass(frozen=True, kw_only=True)
class ApiAccessLog:
    """Audit record of an external API access.

    ``id`` and ``created_at`` are assigned by the writer when absent.

    Attributes:
        external_service_id: Caller identity (X-Consumer-Custom-ID).
        api_key_id: API key presented by the caller.
        endpoint: Logical endpoint that was read.
        http_method: HTTP verb of the request.
        ip_address: Caller address (X-Forwarded-For).
        user_agent: Caller User-Agent.
        response_status: HTTP status returned to the caller.
        id: Record identifier.
        created_at: When the access was recorded.
    """

    external_service_id: str
    api_key_id: str
    endpoint: str
    http_method: HttpMethod
    ip_address: str
    user_agent: str
    response_status: int
    id: str | None = None
    created_at: datetime | None = None

    def with_identity(self, record_id: str, created_at: datetime) -> "ApiAccessLog":
        """Return a copy with id and timestamp filled in where missing."""
        return replace(
            self,
            id=self.id or record_id,
            created_at=self.created_at or created_at,
        )
