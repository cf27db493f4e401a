"""Event catalog query handlers.

Architecture:
- Return Result[DTO, DomainError]
- NO domain events (queries are side-effect free)
- Organisers and attendees are resolved with one batched account lookup
"""

from src.application.dtos import EventDetail, EventView, PersonSummary
from src.application.queries.event_queries import GetEvent, IsEventOrganiser, ListEvents
from src.application.services.access_rules import event_not_found
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import AccountRepository, EventRepository


class ListEventsHandler:
    """Handler for ListEvents query."""

    def __init__(
        self,
        event_repo: EventRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._event_repo = event_repo
        self._account_repo = account_repo

    async def handle(self, query: ListEvents) -> Result[list[EventView], DomainError]:
        events = await self._event_repo.list_all()
        organiser_ids = list({event.organiser_id for event in events})
        organisers = {
            account.id: PersonSummary.from_account(account)
            for account in await self._account_repo.find_by_ids(organiser_ids)
        }
        return Success(
            value=[
                EventView(event=event, organiser=organisers.get(event.organiser_id))
                for event in events
            ]
        )


class GetEventHandler:
    """Handler for GetEvent query.

    Attendees are listed in roster order (registration order).
    """

    def __init__(
        self,
        event_repo: EventRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._event_repo = event_repo
        self._account_repo = account_repo

    async def handle(self, query: GetEvent) -> Result[EventDetail, DomainError]:
        event = await self._event_repo.find_by_id(query.event_id)
        if event is None:
            return Failure(error=event_not_found(query.event_id))

        ids = [event.organiser_id, *event.registered_account_ids]
        people = {
            account.id: PersonSummary.from_account(account)
            for account in await self._account_repo.find_by_ids(ids)
        }
        attendees = [
            people[account_id]
            for account_id in event.registered_account_ids
            if account_id in people
        ]
        return Success(
            value=EventDetail(
                event=event,
                organiser=people.get(event.organiser_id),
                attendees=attendees,
            )
        )


class IsEventOrganiserHandler:
    """Handler for IsEventOrganiser query."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(self, query: IsEventOrganiser) -> Result[bool, DomainError]:
        event = await self._event_repo.find_by_id(query.event_id)
        if event is None:
            return Failure(error=event_not_found(query.event_id))
        return Success(
            value=query.auth.is_admin and event.is_organised_by(query.auth.account_id)
        )
