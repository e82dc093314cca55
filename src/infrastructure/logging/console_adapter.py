"""structlog adapter writing one event per line to stdout.

Rendering depends on the environment (chosen by the container):
- development: colored key=value console output
- testing/ci/production: JSON, one object per line

Request-scoped values bound with ``structlog.contextvars`` (the trace id set
by TraceMiddleware) are merged into every event.

Satisfies LoggerProtocol structurally; there is no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def build_processors(use_json: bool) -> list[Any]:
    """Processor chain shared by every adapter instance."""
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _flatten_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: Render JSON instead of console output.
        level: Minimum level name; lower events are dropped.
        service: Optional service name bound to every event.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        service: str | None = None,
    ) -> None:
        structlog.configure(
            processors=build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        logger = structlog.get_logger()
        self._logger = logger.bind(service=service) if service else logger

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level; ``error`` is flattened to type and message."""
        self._logger.error(message, **_flatten_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_flatten_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
