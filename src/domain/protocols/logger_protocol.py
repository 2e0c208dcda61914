"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Every call is a message plus
key-value context; implementations add timestamp, level and trace id.

Security:
    - NEVER log passwords, password hashes or tokens
    - Log user ids and user names, not request bodies

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("user_registered", user_id=str(user_id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("login_failed", user_name=user_name)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
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
            message: Event name (avoid f-strings; use context).
            error: Optional exception; adds error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            handler_logger = logger.bind(handler="LoginUserHandler")
            handler_logger.info("login_succeeded", user_id=str(user.id))
        """
        ...
