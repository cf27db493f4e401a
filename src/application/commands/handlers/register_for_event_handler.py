"""Register-for-event handler (the registration workflow).

Flow:
1. Emit RegistrationAttempted event
2. Load the event (NotFound)
3. Reject a second registration for the same (account, event) pair
4. Reject when the roster has reached max_capacity
5. Generate the registration id and render the QR token. Nothing has been
   written yet, so a token failure leaves no trace
6. Re-read the event under a row lock and check capacity again
7. In the same transaction: insert the registration, add the account to
   the event roster, add the event to the account roster
8. Commit, which releases the lock
9. Emit RegistrationCreated event
10. Schedule the confirmation email on a detached task
11. Return Success(RegistrationView)

Concurrency:
    Two requests for the same pair can both pass step 3. The unique index
    ``uq_registrations_account_event`` rejects the second insert and the
    repository maps that to the same REGISTRATION_ALREADY_EXISTS conflict.

    Step 4 reads the roster without a lock and only saves rendering a QR
    code for an event that is already full. The authoritative check is
    step 6: ``find_by_id_for_update`` holds the event row until commit, so
    registrations for one event are serialised from there on and the
    roster never grows past max_capacity.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.registration_commands import RegisterForEvent
from src.application.dtos import RegistrationView
from src.application.services import NotificationDispatcher
from src.application.services.access_rules import event_not_found
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Event, Registration
from src.domain.events import (
    RegistrationAttempted,
    RegistrationCreated,
    RegistrationFailed,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    EventRepository,
    RegistrationRepository,
    TokenGeneratorProtocol,
    UnitOfWorkProtocol,
)
from src.domain.value_objects import RegistrationTokenPayload


class RegisterForEventHandler:
    """Handler for RegisterForEvent command."""

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        token_generator: TokenGeneratorProtocol,
        notifications: NotificationDispatcher,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._account_repo = account_repo
        self._uow = uow
        self._token_generator = token_generator
        self._notifications = notifications
        self._event_bus = event_bus

    async def handle(
        self, cmd: RegisterForEvent
    ) -> Result[RegistrationView, DomainError]:
        """Handle registration.

        Returns:
            Success(RegistrationView) with the stored registration and event.
            Failure(NotFoundError) if the event does not exist.
            Failure(ConflictError) if the caller is already registered.
            Failure(ValidationError) if the event is full.
            Failure(TokenGenerationError) if the QR code could not be rendered.
        """
        auth = cmd.auth
        await self._event_bus.publish(
            RegistrationAttempted(account_id=auth.account_id, event_id=cmd.event_id)
        )

        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            return await self._fail(cmd, event_not_found(cmd.event_id))

        existing = await self._registration_repo.find_by_account_and_event(
            auth.account_id, event.id
        )
        if existing is not None:
            return await self._fail(
                cmd,
                ConflictError(
                    code=ErrorCode.REGISTRATION_ALREADY_EXISTS,
                    message="You are already registered for this event",
                    resource_type="Registration",
                    conflicting_field="event_id",
                ),
            )

        if event.is_full():
            return await self._fail(cmd, _event_full(event))

        registration_id = uuid7()
        registered_at = datetime.now(UTC)
        payload = RegistrationTokenPayload(
            registration_id=registration_id,
            account_id=auth.account_id,
            account_name=auth.name,
            account_email=auth.email,
            event_id=event.id,
            event_title=event.title,
            event_date=event.date,
            event_time=event.time,
            event_venue=event.venue,
            issued_at=registered_at,
        )
        token_result = await self._token_generator.generate(payload)
        if isinstance(token_result, Failure):
            return await self._fail(cmd, token_result.error)

        locked = await self._event_repo.find_by_id_for_update(event.id)
        if locked is None or locked.is_full():
            await self._uow.rollback()
            error = (
                event_not_found(cmd.event_id) if locked is None else _event_full(locked)
            )
            return await self._fail(cmd, error)
        event = locked

        registration = Registration(
            id=registration_id,
            account_id=auth.account_id,
            event_id=event.id,
            qr_code=token_result.value,
            registered_at=registered_at,
        )
        add_result = await self._registration_repo.add(registration)
        if isinstance(add_result, Failure):
            await self._uow.rollback()
            return await self._fail(cmd, add_result.error)

        await self._event_repo.add_attendee(event.id, auth.account_id)
        await self._account_repo.add_registered_event(auth.account_id, event.id)
        await self._uow.commit()
        event.registered_account_ids.append(auth.account_id)

        await self._event_bus.publish(
            RegistrationCreated(
                registration_id=registration.id,
                account_id=auth.account_id,
                event_id=event.id,
            )
        )
        self._notifications.dispatch_confirmation(auth, event, registration)

        return Success(value=RegistrationView(registration=registration, event=event))

    async def _fail(
        self, cmd: RegisterForEvent, error: DomainError
    ) -> Result[RegistrationView, DomainError]:
        await self._event_bus.publish(
            RegistrationFailed(
                account_id=cmd.auth.account_id,
                event_id=cmd.event_id,
                reason=error.code.value,
            )
        )
        return Failure(error=error)


def _event_full(event: Event) -> ValidationError:
    return ValidationError(
        code=ErrorCode.EVENT_FULL,
        message="Event is full",
        details={"max_capacity": event.max_capacity},
    )
