"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward message and context
- error()/critical() flatten the exception into context
- bind() returns a new adapter with context
- Renderer selection (JSON vs console)
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_forwards_message_and_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("cache miss", key="trx_count")

            getattr(mock_logger, level).assert_called_once_with(
                "cache miss", key="trx_count"
            )

    def test_error_includes_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("unhandled exception", error=ValueError("bad"), path="/x")

            mock_logger.error.assert_called_once_with(
                "unhandled exception",
                path="/x",
                error_type="ValueError",
                error_message="bad",
            )

    def test_critical_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("database unreachable")

            mock_logger.critical.assert_called_once_with("database unreachable")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="t-1")
            bound.info("hello")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="t-1")
            bound_logger.info.assert_called_once_with("hello")

    def test_with_context_is_bind(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(page=1)

            mock_logger.bind.assert_called_once_with(page=1)


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_merges_context_variables_first(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[0] is mock_structlog.contextvars.merge_contextvars

    def test_binds_service_name_when_given(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter(service="ledger-history-api")

            mock_logger.bind.assert_called_once_with(service="ledger-history-api")
