"""Application layer error types.

Application errors are what query handlers return to the presentation layer.
Each code carries a default HTTP status; a handler may override it for a
single error.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.constants import INTERNAL_SERVER_ERROR_MESSAGE
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.INVALID_PARAMETER,
        ...     message="Page and size must be greater than 0",
        ... )
        >>> error.http_status
        400
    """

    INVALID_PARAMETER = "invalid_parameter"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_SERVER = "internal_server"


DEFAULT_HTTP_STATUS: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.INVALID_PARAMETER: 400,
    ApplicationErrorCode.UNAUTHENTICATED: 401,
    ApplicationErrorCode.FORBIDDEN: 403,
    ApplicationErrorCode.NOT_FOUND: 404,
    ApplicationErrorCode.CONFLICT: 409,
    ApplicationErrorCode.INTERNAL_SERVER: 500,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Client-facing error message.
        domain_error: Underlying error, if the failure came from a lower layer.
        details: Additional context as key-value pairs.
        status_code: Overrides the code's default HTTP status.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Transaction with id trx-1 not found",
        ... )
        >>> error.http_status
        404
        >>> ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="already archived",
        ...     status_code=422,
        ... ).http_status
        422
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
    status_code: int | None = None

    @property
    def http_status(self) -> int:
        """HTTP status to answer with."""
        if self.status_code is not None:
            return self.status_code
        return DEFAULT_HTTP_STATUS[self.code]


def internal_server_error(domain_error: DomainError | None = None) -> ApplicationError:
    """Build the generic 500 error, keeping the cause for logging.

    The client-facing message never reveals the underlying failure.
    """
    return ApplicationError(
        code=ApplicationErrorCode.INTERNAL_SERVER,
        message=INTERNAL_SERVER_ERROR_MESSAGE,
        domain_error=domain_error,
    )
