"""Unit tests for ErrorResponseBuilder and validation message formatting."""

import json

import pytest
from fastapi.exceptions import RequestValidationError

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.presentation.api.v1.errors import ErrorResponseBuilder
from src.presentation.api.v1.errors.exception_handlers import (
    INVALID_INPUT_MESSAGE,
    validation_error_message,
)


@pytest.mark.unit
class TestErrorResponseBuilder:
    def test_envelope_from_application_error(self):
        error = ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message="Transaction with id trx-1 not found",
        )

        response = ErrorResponseBuilder.from_application_error(error)

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "meta": {"code": "404", "message": "Transaction with id trx-1 not found"},
            "data": None,
        }

    def test_status_override_is_used(self):
        error = ApplicationError(
            code=ApplicationErrorCode.CONFLICT, message="locked", status_code=423
        )

        response = ErrorResponseBuilder.from_application_error(error)

        assert response.status_code == 423
        assert json.loads(response.body)["meta"]["code"] == "423"

    def test_build_passes_headers(self):
        response = ErrorResponseBuilder.build(405, "Method Not Allowed", {"Allow": "GET"})

        assert response.headers["allow"] == "GET"


@pytest.mark.unit
class TestValidationErrorMessage:
    def test_lists_missing_parameters(self):
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("header", "X-Consumer-Custom-ID"), "msg": "Field required"},
                {"type": "missing", "loc": ("query", "X-API-Key"), "msg": "Field required"},
            ]
        )

        assert (
            validation_error_message(exc)
            == "missing required parameters: X-Consumer-Custom-ID, X-API-Key"
        )

    def test_other_failures_are_invalid_input(self):
        exc = RequestValidationError(
            [{"type": "int_parsing", "loc": ("query", "page"), "msg": "not an int"}]
        )

        assert validation_error_message(exc) == INVALID_INPUT_MESSAGE
