"""Error envelope builders and exception handlers.

Exports:
    ErrorResponseBuilder: Utility for building envelope error responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
