"""Attendance check-in handler.

Flow:
1. Parse the scanned payload (TOKEN_INVALID)
2. Load the registration it names (NotFound)
3. The payload's event must match the registration and, if the scanner
   named an event, that event too (TOKEN_INVALID)
4. Caller must be the admin organiser of the event (Forbidden)
5. Reject a second check-in (ALREADY_CHECKED_IN)
6. Mark attended and commit
"""

from src.application.commands.registration_commands import CheckInAttendee
from src.application.dtos import CheckInResult
from src.application.services.access_rules import (
    event_not_found,
    organiser_check,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.events import AttendeeCheckedIn
from src.domain.protocols import (
    EventBusProtocol,
    EventRepository,
    RegistrationRepository,
    UnitOfWorkProtocol,
)
from src.domain.value_objects import RegistrationTokenPayload


def _invalid_token(reason: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.TOKEN_INVALID,
        message="Invalid registration code",
        field="payload",
        details={"reason": reason},
    )


class CheckInAttendeeHandler:
    """Handler for CheckInAttendee command."""

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_repo: EventRepository,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_repo = event_repo
        self._uow = uow
        self._event_bus = event_bus

    async def handle(self, cmd: CheckInAttendee) -> Result[CheckInResult, DomainError]:
        try:
            payload = RegistrationTokenPayload.from_json(cmd.payload)
        except ValueError as e:
            return Failure(error=_invalid_token(str(e)))

        registration = await self._registration_repo.find_by_id(
            payload.registration_id
        )
        if registration is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REGISTRATION_NOT_FOUND,
                    message="Registration not found",
                    resource_type="Registration",
                    resource_id=str(payload.registration_id),
                )
            )

        if registration.event_id != payload.event_id or (
            cmd.event_id is not None and cmd.event_id != registration.event_id
        ):
            return Failure(error=_invalid_token("event mismatch"))

        event = await self._event_repo.find_by_id(registration.event_id)
        if event is None:
            return Failure(error=event_not_found(registration.event_id))

        denied = organiser_check(cmd.auth, event, "check in attendees for")
        if denied is not None:
            return Failure(error=denied)

        if registration.attended:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ALREADY_CHECKED_IN,
                    message="Attendee already checked in",
                    details={
                        "attended_at": registration.attended_at.isoformat()
                        if registration.attended_at
                        else None
                    },
                )
            )

        registration.mark_attended()
        await self._registration_repo.update(registration)
        await self._uow.commit()

        await self._event_bus.publish(
            AttendeeCheckedIn(
                registration_id=registration.id,
                event_id=event.id,
                checked_in_by=cmd.auth.account_id,
            )
        )
        return Success(
            value=CheckInResult(
                registration=registration,
                attendee_name=payload.account_name,
                event_title=event.title,
            )
        )
