"""Event catalog commands (CQRS write operations)."""

from dataclasses import dataclass
import datetime as dt
from uuid import UUID

from src.domain.value_objects import AuthContext


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Publish a new event. The caller becomes its organiser.

    Attributes:
        auth: Authenticated caller (must be an admin).
        max_capacity: None means the configured default (200).
    """

    auth: AuthContext
    title: str
    description: str
    date: dt.date
    time: str
    venue: str
    image_url: str
    max_capacity: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEvent:
    """Partially update an event. Only the organiser may do this.

    Fields left as None keep their current value.
    """

    auth: AuthContext
    event_id: UUID
    title: str | None = None
    description: str | None = None
    date: dt.date | None = None
    time: str | None = None
    venue: str | None = None
    image_url: str | None = None
    max_capacity: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteEvent:
    """Delete an event with its registrations, rosters and image."""

    auth: AuthContext
    event_id: UUID
