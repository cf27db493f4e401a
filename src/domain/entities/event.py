"""Event domain entity.

An event is published by an admin (its organiser) and holds a roster of
registered account ids. The roster is a denormalised cache of the
registration ledger and is only written by the registration workflow and
by event deletion.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID


@dataclass
class Event:
    """Event domain entity.

    Business Rules:
        - Only the organiser may update or delete the event
        - max_capacity is positive
        - Registration is refused once the roster reaches max_capacity

    Attributes:
        id: Unique event identifier (UUIDv7).
        title: Event title.
        description: Long-form description.
        date: Calendar date the event takes place.
        time: Free-form display time (e.g. "9:00 AM - 5:00 PM").
        venue: Location.
        image_url: Banner image URL.
        organiser_id: Account id of the admin who created the event.
        max_capacity: Maximum number of registrations.
        registered_account_ids: Roster of registered accounts.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    title: str
    description: str
    date: date
    time: str
    venue: str
    image_url: str
    organiser_id: UUID
    max_capacity: int
    created_at: datetime
    updated_at: datetime
    registered_account_ids: list[UUID] = field(default_factory=list)

    @property
    def registered_count(self) -> int:
        return len(self.registered_account_ids)

    @property
    def seats_remaining(self) -> int:
        return max(self.max_capacity - self.registered_count, 0)

    def is_full(self) -> bool:
        """Check the capacity gate.

        Returns:
            True if the roster has reached (or overshot) max_capacity.
        """
        return self.registered_count >= self.max_capacity

    def is_organised_by(self, account_id: UUID) -> bool:
        return self.organiser_id == account_id

    def apply_changes(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        date: date | None = None,
        time: str | None = None,
        venue: str | None = None,
        image_url: str | None = None,
        max_capacity: int | None = None,
    ) -> None:
        """Apply a partial update; None leaves a field unchanged."""
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if date is not None:
            self.date = date
        if time is not None:
            self.time = time
        if venue is not None:
            self.venue = venue
        if image_url is not None:
            self.image_url = image_url
        if max_capacity is not None:
            self.max_capacity = max_capacity
        self.updated_at = datetime.now(UTC)
