"""Console logging adapter.

Writes error-translation events to stdout through structlog.
- Development: colored console renderer
- Testing/CI/Production: one JSON object per line

Satisfies LoggerProtocol structurally (PEP 544); it does not inherit from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def exception_context(error: Exception | None) -> dict[str, str]:
    """Flatten an exception into loggable fields (type and message only)."""
    if error is None:
        return {}
    return {"error_type": type(error).__name__, "error_message": str(error)}


class ConsoleAdapter:
    """structlog-backed logger for 4xx warnings and 5xx errors.

    Args:
        use_json (bool): Render JSON lines instead of colored console output.
        level (int): Minimum stdlib level number that is emitted.
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, adding error_type/error_message when ``error`` is given."""
        self._logger.error(message, **context, **exception_context(error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``."""
        return self._wrap(self._logger.bind(**context))
