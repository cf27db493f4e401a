"""Registration ledger query handlers."""

from src.application.dtos import RegistrationStatus, RegistrationView
from src.application.queries.registration_queries import (
    CheckRegistration,
    GetRegistration,
    ListMyRegistrations,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventRepository, RegistrationRepository


class ListMyRegistrationsHandler:
    """Handler for ListMyRegistrations query.

    Registrations whose event no longer exists are returned with
    ``event=None`` rather than dropped.
    """

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_repo: EventRepository,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_repo = event_repo

    async def handle(
        self, query: ListMyRegistrations
    ) -> Result[list[RegistrationView], DomainError]:
        registrations = await self._registration_repo.list_by_account(
            query.auth.account_id
        )
        event_ids = list({r.event_id for r in registrations})
        events = {
            event.id: event
            for event in await self._event_repo.find_by_ids(event_ids)
        }
        return Success(
            value=[
                RegistrationView(
                    registration=registration,
                    event=events.get(registration.event_id),
                )
                for registration in registrations
            ]
        )


class GetRegistrationHandler:
    """Handler for GetRegistration query (owner only)."""

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_repo: EventRepository,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_repo = event_repo

    async def handle(
        self, query: GetRegistration
    ) -> Result[RegistrationView, DomainError]:
        registration = await self._registration_repo.find_by_id(query.registration_id)
        if registration is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REGISTRATION_NOT_FOUND,
                    message="Registration not found",
                    resource_type="Registration",
                    resource_id=str(query.registration_id),
                )
            )
        if not registration.is_owned_by(query.auth.account_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message="Unauthorized",
                    required_permission="owner",
                )
            )
        event = await self._event_repo.find_by_id(registration.event_id)
        return Success(value=RegistrationView(registration=registration, event=event))


class CheckRegistrationHandler:
    """Handler for CheckRegistration query."""

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        self._registration_repo = registration_repo

    async def handle(
        self, query: CheckRegistration
    ) -> Result[RegistrationStatus, DomainError]:
        registration = await self._registration_repo.find_by_account_and_event(
            query.auth.account_id, query.event_id
        )
        return Success(
            value=RegistrationStatus(
                is_registered=registration is not None,
                registration=registration,
            )
        )
