"""Event catalog queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They never
change state and never emit domain events.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import AuthContext


@dataclass(frozen=True, kw_only=True)
class ListEvents:
    """List all events, earliest date first, with organisers resolved."""


@dataclass(frozen=True, kw_only=True)
class GetEvent:
    """Get one event with its organiser and attendee roster."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class IsEventOrganiser:
    """Whether the caller is the admin who organises the event."""

    auth: AuthContext
    event_id: UUID
