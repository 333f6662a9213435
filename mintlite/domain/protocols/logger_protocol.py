"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while staying
backend-agnostic. Implementations MUST emit structured key-value context.

Log Levels:
    - DEBUG: Detailed diagnostic info (per-holding refresh steps)
    - INFO: Normal operational events (holding created, refresh completed)
    - WARNING: Degraded outcomes (symbol not found, provider unavailable)
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from mintlite.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("holding_created", holding_id=str(holding.id))

    request_logger = logger.bind(user_id=str(user_id))
    request_logger.info("portfolio_refresh_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
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
            message: Event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
