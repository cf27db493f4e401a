"""Event catalog read models.

DTOs:
    - PersonSummary: Name and email of an organiser or attendee
    - EventView: Event plus its organiser (list and write results)
    - EventDetail: EventView plus the resolved attendee roster
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import Account, Event


@dataclass(frozen=True, kw_only=True)
class PersonSummary:
    id: UUID
    name: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "PersonSummary":
        return cls(id=account.id, name=account.name, email=account.email)


@dataclass(frozen=True, kw_only=True)
class EventView:
    """Event with its organiser resolved.

    Attributes:
        event: The event entity.
        organiser: Organiser summary, None if the account no longer exists.
    """

    event: Event
    organiser: PersonSummary | None


@dataclass(frozen=True, kw_only=True)
class EventDetail(EventView):
    """Event with organiser and registered attendees."""

    attendees: list[PersonSummary] = field(default_factory=list)
