"""Error response builder for the ``{meta, data}`` envelope.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError
from src.schemas.common_schemas import ErrorResponse


class ErrorResponseBuilder:
    """Build envelope error responses from application errors.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Transaction with id trx-1 not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error)
        >>> response.status_code
        404
    """

    @staticmethod
    def from_application_error(error: ApplicationError) -> JSONResponse:
        """Convert ApplicationError to an envelope JSON response.

        The HTTP status is the error's override when set, otherwise the
        default for its code.
        """
        return ErrorResponseBuilder.build(error.http_status, error.message)

    @staticmethod
    def build(
        status_code: int,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an envelope response for an arbitrary status and message."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse.build(status_code, message).model_dump(
                by_alias=True
            ),
            headers=headers,
        )
