"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs: a message plus key-value context.
Adapters live in ``testapi.infrastructure.logging``.

Security:
    - NEVER log one-time passwords returned by the User API

Usage:
    from testapi.core.container import get_logger

    logger = get_logger()
    logger.info("user_created", user_id=str(user_id), username=username)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("user_not_found", user_id=str(user_id))
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
        """Log an error-level message.

        Args:
            message: Event name or short message (use context, not f-strings).
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call.

        The original logger is left unchanged.
        """
        ...
