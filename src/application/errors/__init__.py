"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    internal_server_error: Builder for the generic 500 error
"""

from src.application.errors.application_error import (
    DEFAULT_HTTP_STATUS,
    ApplicationError,
    ApplicationErrorCode,
    internal_server_error,
)

__all__ = [
    "DEFAULT_HTTP_STATUS",
    "ApplicationError",
    "ApplicationErrorCode",
    "internal_server_error",
]
