"""Unit tests for application layer errors."""

import pytest

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    internal_server_error,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError


@pytest.mark.unit
class TestApplicationErrorStatus:
    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ApplicationErrorCode.INVALID_PARAMETER, 400),
            (ApplicationErrorCode.UNAUTHENTICATED, 401),
            (ApplicationErrorCode.FORBIDDEN, 403),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.CONFLICT, 409),
            (ApplicationErrorCode.INTERNAL_SERVER, 500),
        ],
    )
    def test_default_status_per_code(self, code, status):
        assert ApplicationError(code=code, message="x").http_status == status

    def test_status_override(self):
        error = ApplicationError(
            code=ApplicationErrorCode.CONFLICT, message="x", status_code=422
        )

        assert error.http_status == 422


@pytest.mark.unit
class TestInternalServerError:
    def test_hides_cause_from_message(self):
        cause = DomainError(
            code=ErrorCode.CACHE_UNAVAILABLE, message="redis at 10.0.0.5 refused"
        )

        error = internal_server_error(cause)

        assert error.message == "internal server error"
        assert error.http_status == 500
        assert error.domain_error is cause

    def test_domain_error_str(self):
        error = DomainError(code=ErrorCode.INVALID_PAGINATION, message="bad input")

        assert str(error) == f"{ErrorCode.INVALID_PAGINATION.value}: bad input"
