"""Update event handler (organiser only, partial update)."""

from src.application.commands.event_commands import UpdateEvent
from src.application.dtos import EventView, PersonSummary
from src.application.services.access_rules import (
    event_not_found,
    organiser_check,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import EventUpdated
from src.domain.protocols import EventBusProtocol, EventRepository, UnitOfWorkProtocol


class UpdateEventHandler:
    """Handler for UpdateEvent command.

    Lowering max_capacity below the current roster size is allowed: existing
    registrations are kept and new ones are refused until seats free up.
    """

    def __init__(
        self,
        event_repo: EventRepository,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._uow = uow
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateEvent) -> Result[EventView, DomainError]:
        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            return Failure(error=event_not_found(cmd.event_id))

        denied = organiser_check(cmd.auth, event, "edit")
        if denied is not None:
            return Failure(error=denied)

        event.apply_changes(
            title=cmd.title,
            description=cmd.description,
            date=cmd.date,
            time=cmd.time,
            venue=cmd.venue,
            image_url=cmd.image_url,
            max_capacity=cmd.max_capacity,
        )
        await self._event_repo.update(event)
        await self._uow.commit()

        await self._event_bus.publish(
            EventUpdated(event_id=event.id, organiser_id=event.organiser_id)
        )
        organiser = PersonSummary(
            id=cmd.auth.account_id, name=cmd.auth.name, email=cmd.auth.email
        )
        return Success(value=EventView(event=event, organiser=organiser))
