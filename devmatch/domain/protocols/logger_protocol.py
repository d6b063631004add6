"""LoggerProtocol definition for structured logging.

Orchestrators receive a LoggerProtocol and never import a logging backend.
Implementations MUST keep logs structured (message + key-value context) and
safe: ids and error codes are fine, free text written by users (titles,
descriptions, motivation messages) is not logged.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Successful state changes (project created, application accepted)
    - WARNING: Refused operations (not owner, project full, quota reached)
    - ERROR: Operation failed unexpectedly, system continues
    - CRITICAL: System-wide failure

Usage:
    from devmatch.core.container import get_logger

    logger = get_logger()
    logger.info("application_accepted", project_id=str(project_id))

    request_logger = logger.bind(user_id=str(user_id))
    request_logger.warning("apply_refused", code="project_full")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard log levels and context binding for
    request-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Short event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Short event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
