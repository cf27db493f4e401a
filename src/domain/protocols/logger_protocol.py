"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Implementations MUST keep logs structured (message plus
key-value context) and safe (no secrets).

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded behaviour the request survived
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Security:
    - NEVER log passwords, OTP codes, session ids or QR payloads

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("registration_created", registration_id=str(registration.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        ...

    def info(self, message: str, /, **context: Any) -> None:
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
