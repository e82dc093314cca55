"""Structured logging port.

Calls take a constant message plus keyword context; never interpolate values
into the message, and never pass API keys as context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Error-level event.

        ``error``, when given, is recorded as ``error_type`` and
        ``error_message`` fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """New logger carrying ``context`` on every event; self is unchanged."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
