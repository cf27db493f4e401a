"""Logging event handler for domain events.

Structured log lines for every account, registration and catalog event.

Log Levels:
    - INFO: Attempted and succeeded events
    - WARNING: Failed events and cancellations that skipped a retraction
"""

from dataclasses import fields

from src.domain.events import (
    AccountRegistrationAttempted,
    AccountRegistrationFailed,
    AccountRegistrationSucceeded,
    AccountVerificationFailed,
    AccountVerificationSucceeded,
    AttendeeCheckedIn,
    DomainEvent,
    EventCreated,
    EventDeleted,
    EventUpdated,
    LoggedOut,
    LoginFailed,
    LoginSucceeded,
    OtpIssued,
    RegistrationAttempted,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationFailed,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> handler.register(event_bus)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe this handler to every event it logs."""
        for event_type in (
            AccountRegistrationAttempted,
            AccountRegistrationSucceeded,
            OtpIssued,
            AccountVerificationSucceeded,
            LoginSucceeded,
            LoggedOut,
            RegistrationAttempted,
            RegistrationCreated,
            AttendeeCheckedIn,
            EventCreated,
            EventUpdated,
            EventDeleted,
        ):
            event_bus.subscribe(event_type, self.handle_info)
        for event_type in (
            AccountRegistrationFailed,
            AccountVerificationFailed,
            LoginFailed,
            RegistrationFailed,
        ):
            event_bus.subscribe(event_type, self.handle_failure)
        event_bus.subscribe(RegistrationCancelled, self.handle_registration_cancelled)

    async def handle_info(self, event: DomainEvent) -> None:
        self._logger.info(_event_name(event), **_fields(event))

    async def handle_failure(self, event: DomainEvent) -> None:
        self._logger.warning(_event_name(event), **_fields(event))

    async def handle_registration_cancelled(self, event: DomainEvent) -> None:
        """Cancellations with skipped retractions are logged as warnings."""
        assert isinstance(event, RegistrationCancelled)
        if event.retraction_failures:
            self._logger.warning(_event_name(event), **_fields(event))
        else:
            self._logger.info(_event_name(event), **_fields(event))


def _event_name(event: DomainEvent) -> str:
    """CamelCase class name to snake_case log event name."""
    name = type(event).__name__
    return "".join(
        f"_{ch.lower()}" if ch.isupper() and i else ch.lower()
        for i, ch in enumerate(name)
    )


def _fields(event: DomainEvent) -> dict[str, str]:
    result: dict[str, str] = {}
    for field in fields(event):
        value = getattr(event, field.name)
        if value is None:
            continue
        if isinstance(value, tuple):
            result[field.name] = ",".join(str(v) for v in value)
        elif hasattr(value, "isoformat"):
            result[field.name] = value.isoformat()
        else:
            result[field.name] = str(value)
    return result

