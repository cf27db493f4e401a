"""EventRepository protocol for the event catalog.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.event import Event


class EventRepository(Protocol):
    """Event repository protocol (port).

    Events are returned with their roster (registered_account_ids) loaded.

    Methods:
        find_by_id: Retrieve event by ID
        find_by_id_for_update: Retrieve event and lock its row until commit
        find_by_ids: Retrieve several events
        list_all: All events ordered by date
        add: Insert a new event
        update: Persist changed event fields
        delete: Delete event and its attendee roster
        add_attendee: Add an account to the event roster
        remove_attendee: Remove an account from the event roster
    """

    async def find_by_id(self, event_id: UUID) -> Event | None:
        ...

    async def find_by_id_for_update(self, event_id: UUID) -> Event | None:
        """Find an event and lock its row for the rest of the transaction.

        Concurrent callers for the same event wait until the holder commits
        or rolls back, then see its writes, roster included.
        """
        ...

    async def find_by_ids(self, event_ids: list[UUID]) -> list[Event]:
        """Find several events by ID. Unknown ids are skipped."""
        ...

    async def list_all(self) -> list[Event]:
        """List every event, earliest date first."""
        ...

    async def add(self, event: Event) -> None:
        ...

    async def update(self, event: Event) -> None:
        ...

    async def delete(self, event_id: UUID) -> bool:
        """Delete an event and its roster rows.

        Returns:
            True if the event existed.
        """
        ...

    async def add_attendee(self, event_id: UUID, account_id: UUID) -> None:
        ...

    async def remove_attendee(self, event_id: UUID, account_id: UUID) -> bool:
        """Remove one roster entry.

        Returns:
            True if an entry was removed, False if there was none.
        """
        ...
