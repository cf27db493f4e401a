"""Registration ledger read models."""

from dataclasses import dataclass

from src.domain.entities import Event, Registration


@dataclass(frozen=True, kw_only=True)
class RegistrationView:
    """Registration with the event it belongs to.

    Attributes:
        registration: The ledger entry.
        event: Registered event, None if it has since been removed.
    """

    registration: Registration
    event: Event | None


@dataclass(frozen=True, kw_only=True)
class RegistrationStatus:
    """Whether the caller holds a registration for an event."""

    is_registered: bool
    registration: Registration | None = None


@dataclass(frozen=True, kw_only=True)
class CheckInResult:
    """Outcome of a successful check-in.

    Attributes:
        registration: Updated registration (attended, attended_at set).
        attendee_name: Name read from the token payload.
        event_title: Event title read from the token payload.
    """

    registration: Registration
    attendee_name: str
    event_title: str
