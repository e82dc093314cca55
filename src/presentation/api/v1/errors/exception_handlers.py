"""Global exception handlers for FastAPI application.

Every exception that escapes an endpoint is answered with the
``{meta: {code, message}, data: null}`` envelope.

Handlers:
    http_exception_handler: HTTPException -> its own status
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: anything else -> 500 "internal server error"

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.constants import INTERNAL_SERVER_ERROR_MESSAGE
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import TRACE_HEADER
from src.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)

INVALID_INPUT_MESSAGE = "invalid input"


def validation_error_message(exc: RequestValidationError) -> str:
    """Summarize validation errors for the client.

    Missing parameters are listed by name (header, query or path alias);
    any other failure is reported as invalid input.
    """
    missing = [
        str(error["loc"][-1])
        for error in exc.errors()
        if error.get("type") == "missing" and error.get("loc")
    ]
    if missing:
        return f"missing required parameters: {', '.join(missing)}"
    return INVALID_INPUT_MESSAGE


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException (including routing 404/405) to the envelope."""
    assert isinstance(exc, StarletteHTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return ErrorResponseBuilder.build(
        exc.status_code,
        detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 envelope."""
    assert isinstance(exc, RequestValidationError)

    message = validation_error_message(exc)
    get_logger().warning(
        "request validation failed",
        path=request.url.path,
        detail=message,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return ErrorResponseBuilder.build(status.HTTP_400_BAD_REQUEST, message)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals to the client.

    Starlette answers these from outside TraceMiddleware, so the trace id
    header is set here from ``request.state``.
    """
    trace_id = getattr(request.state, "trace_id", None)
    get_logger().error(
        "unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )
    return ErrorResponseBuilder.build(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_SERVER_ERROR_MESSAGE,
        headers={TRACE_HEADER: trace_id} if trace_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
