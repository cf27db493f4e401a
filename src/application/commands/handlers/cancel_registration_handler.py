"""Cancel registration handler.

Flow:
1. Load the registration (NotFound)
2. Require the caller to own it (Forbidden)
3. Retract the event roster entry, the account roster entry and the
   registration row. Each retraction runs in its own savepoint; a failed
   one is logged and the others still run
4. Commit
5. If the registration row could not be deleted, return its DatabaseError.
   The committed roster retractions stand and a retry removes the row
6. Emit RegistrationCancelled (listing any roster retraction that failed)
"""

from collections.abc import Awaitable, Callable

from src.application.commands.registration_commands import CancelRegistration
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.events import RegistrationCancelled
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    EventRepository,
    LoggerProtocol,
    RegistrationRepository,
    UnitOfWorkProtocol,
)


class CancelRegistrationHandler:
    """Handler for CancelRegistration command."""

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_repo: EventRepository,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_repo = event_repo
        self._account_repo = account_repo
        self._uow = uow
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CancelRegistration) -> Result[None, DomainError]:
        registration = await self._registration_repo.find_by_id(cmd.registration_id)
        if registration is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REGISTRATION_NOT_FOUND,
                    message="Registration not found",
                    resource_type="Registration",
                    resource_id=str(cmd.registration_id),
                )
            )

        if not registration.is_owned_by(cmd.auth.account_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message="You can only cancel your own registrations",
                    required_permission="owner",
                )
            )

        retractions: list[tuple[str, Callable[[], Awaitable[bool]]]] = [
            (
                "event_roster",
                lambda: self._event_repo.remove_attendee(
                    registration.event_id, registration.account_id
                ),
            ),
            (
                "account_roster",
                lambda: self._account_repo.remove_registered_event(
                    registration.account_id, registration.event_id
                ),
            ),
            (
                "registration",
                lambda: self._registration_repo.delete(registration.id),
            ),
        ]

        failures: list[str] = []
        row_error: DomainError | None = None
        for name, retract in retractions:
            match await self._uow.run_isolated(retract):
                case Failure(error=error):
                    failures.append(name)
                    if name == "registration":
                        row_error = error
                    self._logger.error(
                        "registration_retraction_failed",
                        registration_id=str(registration.id),
                        retraction=name,
                        error_code=error.code.value,
                    )
                case Success(value=False):
                    self._logger.debug(
                        "registration_retraction_noop",
                        registration_id=str(registration.id),
                        retraction=name,
                    )
        await self._uow.commit()

        if row_error is not None:
            return Failure(error=row_error)

        await self._event_bus.publish(
            RegistrationCancelled(
                registration_id=registration.id,
                account_id=registration.account_id,
                event_id=registration.event_id,
                retraction_failures=tuple(failures),
            )
        )
        return Success(value=None)
