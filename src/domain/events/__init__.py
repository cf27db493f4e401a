"""Domain events package.

Usage:
    from src.domain.events import RegistrationCreated
"""

from src.domain.events.auth_events import (
    AccountRegistrationAttempted,
    AccountRegistrationFailed,
    AccountRegistrationSucceeded,
    AccountVerificationFailed,
    AccountVerificationSucceeded,
    LoggedOut,
    LoginFailed,
    LoginSucceeded,
    OtpIssued,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.registration_events import (
    AttendeeCheckedIn,
    EventCreated,
    EventDeleted,
    EventUpdated,
    RegistrationAttempted,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationFailed,
)

__all__ = [
    "DomainEvent",
    # Accounts
    "AccountRegistrationAttempted",
    "AccountRegistrationSucceeded",
    "AccountRegistrationFailed",
    "OtpIssued",
    "AccountVerificationSucceeded",
    "AccountVerificationFailed",
    "LoginSucceeded",
    "LoginFailed",
    "LoggedOut",
    # Registrations and events
    "RegistrationAttempted",
    "RegistrationCreated",
    "RegistrationFailed",
    "RegistrationCancelled",
    "AttendeeCheckedIn",
    "EventCreated",
    "EventUpdated",
    "EventDeleted",
]
