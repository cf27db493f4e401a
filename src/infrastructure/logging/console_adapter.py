"""Structured stdout logging for the campus events API.

Development gets structlog's colored console renderer; every other
environment gets one JSON object per line. Request-scoped values bound with
``structlog.contextvars`` (the trace id) are merged into every entry.

Credentials never reach the output: values under the keys in
``SECRET_KEYS`` are masked before rendering, whichever caller logged them.

The adapter satisfies LoggerProtocol structurally and does not inherit it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

SECRET_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "otp",
        "otp_code",
        "session_id",
        "smtp_password",
    }
)
MASK = "***"


def redact_secrets(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor masking values of SECRET_KEYS."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = MASK
    return event_dict


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: JSON lines when True, colored console output when False.
        level: Minimum level name (DEBUG, INFO, ...). Unknown names mean INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                redact_secrets,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level.

        Args:
            message: snake_case event name, e.g. ``confirmation_email_failed``.
            error: Exception whose type and message are added as
                ``error_type`` and ``error_message``.
        """
        self._logger.error(message, **_with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose entries all carry ``context``."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound


def _with_error(
    error: Exception | None, context: dict[str, Any]
) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
