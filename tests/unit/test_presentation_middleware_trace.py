"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID reuse from X-Trace-Id header
- Context reset after the request
- get_trace_id() inside and outside a request

Architecture:
- Unit tests with mocked Starlette Request/Response
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def make_request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


def make_call_next(response: MagicMock | None = None) -> AsyncMock:
    if response is None:
        response = MagicMock()
        response.headers = {}
    return AsyncMock(return_value=response)


@pytest.mark.unit
class TestTraceMiddleware:
    async def test_generates_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(make_request({}), make_call_next())

        UUID(response.headers["X-Trace-Id"])

    async def test_reuses_incoming_trace_id(self):
        middleware = TraceMiddleware(app=MagicMock())
        request = make_request({"X-Trace-Id": "trace-abc"})

        response = await middleware.dispatch(request, make_call_next())

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert request.state.trace_id == "trace-abc"

    async def test_trace_id_visible_during_request(self):
        seen: dict[str, object] = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["context"] = structlog.contextvars.get_contextvars()
            response = MagicMock()
            response.headers = {}
            return response

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(make_request({"X-Trace-Id": "trace-abc"}), call_next)

        assert seen["trace_id"] == "trace-abc"
        assert seen["context"]["trace_id"] == "trace-abc"

    async def test_context_cleared_after_request(self):
        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(make_request({"X-Trace-Id": "trace-abc"}), make_call_next())

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    async def test_context_cleared_when_handler_raises(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await middleware.dispatch(make_request({}), call_next)

        assert get_trace_id() is None


@pytest.mark.unit
def test_get_trace_id_outside_request():
    assert get_trace_id() is None
