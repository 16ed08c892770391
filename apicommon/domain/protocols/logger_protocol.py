"""LoggerProtocol definition for structured logging.

Implementations MUST keep logs structured (message plus key-value context)
and safe (no secrets, no raw request bodies).

Levels used by the error handlers:
    - WARNING: client errors (4xx envelopes)
    - ERROR: server errors (5xx envelopes) and translation failures

Usage:
    from apicommon.core.container import get_logger

    request_logger = get_logger().bind(path=request.url.path, method=request.method)
    request_logger.warning("Request failed", error_type="BusinessError")
    request_logger.error("Request failed with server error", error=exc)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementations may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
