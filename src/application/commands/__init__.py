"""Commands (CQRS write side)."""

from src.application.commands.auth_commands import (
    Login,
    Logout,
    RegisterAccount,
    ResendOtp,
    VerifyOtp,
)
from src.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)
from src.application.commands.registration_commands import (
    CancelRegistration,
    CheckInAttendee,
    RegisterForEvent,
)

__all__ = [
    "CancelRegistration",
    "CheckInAttendee",
    "CreateEvent",
    "DeleteEvent",
    "Login",
    "Logout",
    "RegisterAccount",
    "RegisterForEvent",
    "ResendOtp",
    "UpdateEvent",
    "VerifyOtp",
]
