"""Delete event handler.

Flow:
1. Load the event (NotFound)
2. Require the caller to be its admin organiser (Forbidden)
3. Delete dependent registrations
4. Remove the event from every account roster
5. Delete the event and its attendee roster
6. Commit
7. Release the banner image (best effort, logged on failure)
"""

from src.application.commands.event_commands import DeleteEvent
from src.application.services.access_rules import (
    event_not_found,
    organiser_check,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import EventDeleted
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    EventRepository,
    ImageStorageProtocol,
    LoggerProtocol,
    RegistrationRepository,
    UnitOfWorkProtocol,
)


class DeleteEventHandler:
    """Handler for DeleteEvent command."""

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        image_storage: ImageStorageProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._account_repo = account_repo
        self._uow = uow
        self._image_storage = image_storage
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: DeleteEvent) -> Result[int, DomainError]:
        """Delete the event and everything that references it.

        Returns:
            Success(number of registrations removed).
        """
        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            return Failure(error=event_not_found(cmd.event_id))

        denied = organiser_check(cmd.auth, event, "delete")
        if denied is not None:
            return Failure(error=denied)

        removed = await self._registration_repo.delete_by_event(event.id)
        await self._account_repo.remove_event_from_all(event.id)
        await self._event_repo.delete(event.id)
        await self._uow.commit()

        match await self._image_storage.release(event.image_url):
            case Failure(error=error):
                self._logger.warning(
                    "event_image_release_failed",
                    event_id=str(event.id),
                    error_code=error.code.value,
                )
            case Success(value=released):
                if released:
                    self._logger.info("event_image_released", event_id=str(event.id))

        await self._event_bus.publish(
            EventDeleted(
                event_id=event.id,
                organiser_id=event.organiser_id,
                registrations_removed=removed,
            )
        )
        return Success(value=removed)
