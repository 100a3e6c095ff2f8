"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging interface: a message plus key-value
context. Implementations render the context; callers never format values
into the message.

Security:
    - NEVER pass a plaintext password as a message or context value
    - Log digests, lengths and error codes instead

Usage:
    from pwdigest.core.container import get_logger

    logger = get_logger()
    logger.info("password_accepted", digest_length=len(password.digest))

    scoped = logger.bind(operation="demo")
    scoped.warning("password_rejected", error_code="password_too_short")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name or short message.
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context included in every subsequent log call.

        Returns:
            New logger instance with bound context.
        """
        ...
