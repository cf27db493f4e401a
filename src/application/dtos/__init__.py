"""Application DTOs returned by command and query handlers."""

from src.application.dtos.auth_dtos import AuthenticatedSession, RegisteredAccount
from src.application.dtos.event_dtos import EventDetail, EventView, PersonSummary
from src.application.dtos.registration_dtos import (
    CheckInResult,
    RegistrationStatus,
    RegistrationView,
)

__all__ = [
    "AuthenticatedSession",
    "CheckInResult",
    "EventDetail",
    "EventView",
    "PersonSummary",
    "RegisteredAccount",
    "RegistrationStatus",
    "RegistrationView",
]
