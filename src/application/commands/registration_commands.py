"""Registration ledger commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import AuthContext


@dataclass(frozen=True, kw_only=True)
class RegisterForEvent:
    """Register the caller for an event and issue a QR confirmation token.

    Attributes:
        auth: Authenticated caller; the registration belongs to this account.
        event_id: Event to register for.
    """

    auth: AuthContext
    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class CancelRegistration:
    """Cancel one of the caller's registrations."""

    auth: AuthContext
    registration_id: UUID


@dataclass(frozen=True, kw_only=True)
class CheckInAttendee:
    """Mark a registration as attended from a scanned QR payload.

    Attributes:
        auth: Caller; must be the admin organiser of the event.
        payload: Raw JSON text decoded from the QR code.
        event_id: Event the scanner is checking people into. When given,
            a token for any other event is rejected.
    """

    auth: AuthContext
    payload: str
    event_id: UUID | None = None
