"""Create event handler.

Only admins may publish events; the caller becomes the organiser.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.event_commands import CreateEvent
from src.application.dtos import EventView, PersonSummary
from src.application.services.access_rules import admin_required
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Event
from src.domain.events import EventCreated
from src.domain.protocols import EventBusProtocol, EventRepository, UnitOfWorkProtocol


class CreateEventHandler:
    """Handler for CreateEvent command."""

    def __init__(
        self,
        event_repo: EventRepository,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
        default_capacity: int,
    ) -> None:
        self._event_repo = event_repo
        self._uow = uow
        self._event_bus = event_bus
        self._default_capacity = default_capacity

    async def handle(self, cmd: CreateEvent) -> Result[EventView, DomainError]:
        if not cmd.auth.is_admin:
            return Failure(error=admin_required())

        now = datetime.now(UTC)
        event = Event(
            id=uuid7(),
            title=cmd.title,
            description=cmd.description,
            date=cmd.date,
            time=cmd.time,
            venue=cmd.venue,
            image_url=cmd.image_url,
            organiser_id=cmd.auth.account_id,
            max_capacity=cmd.max_capacity or self._default_capacity,
            created_at=now,
            updated_at=now,
        )
        await self._event_repo.add(event)
        await self._uow.commit()

        await self._event_bus.publish(
            EventCreated(event_id=event.id, organiser_id=event.organiser_id)
        )
        organiser = PersonSummary(
            id=cmd.auth.account_id, name=cmd.auth.name, email=cmd.auth.email
        )
        return Success(value=EventView(event=event, organiser=organiser))
