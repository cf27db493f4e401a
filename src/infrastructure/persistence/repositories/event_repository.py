"""EventRepository - SQLAlchemy implementation of EventRepository protocol.

Maps between domain Event entities and EventModel rows plus the
``event_attendees`` roster table.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.event import Event
from src.infrastructure.persistence.models import EventModel, event_attendees


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    Attributes:
        session: SQLAlchemy async session shared with the unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: UUID) -> Event | None:
        stmt = select(EventModel).where(EventModel.id == event_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        rosters = await self._load_rosters([model.id])
        return self._to_domain(model, rosters[model.id])

    async def find_by_id_for_update(self, event_id: UUID) -> Event | None:
        """Load an event with ``SELECT ... FOR UPDATE``.

        PostgreSQL holds the row lock until the transaction ends. SQLite has
        no row locks; there the connection takes the write lock when the
        transaction begins (see ``database._enable_sqlite_savepoints``).
        """
        stmt = (
            select(EventModel)
            .where(EventModel.id == event_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        rosters = await self._load_rosters([model.id])
        return self._to_domain(model, rosters[model.id])

    async def find_by_ids(self, event_ids: list[UUID]) -> list[Event]:
        """Fetch several events at once; unknown ids are skipped."""
        if not event_ids:
            return []
        stmt = select(EventModel).where(EventModel.id.in_(event_ids))
        result = await self.session.execute(stmt)
        models = list(result.scalars().all())
        rosters = await self._load_rosters([m.id for m in models])
        return [self._to_domain(m, rosters[m.id]) for m in models]

    async def list_all(self) -> list[Event]:
        """List every event, earliest date first.

        Rosters for all events are fetched with a single query.
        """
        stmt = select(EventModel).order_by(EventModel.event_date, EventModel.id)
        result = await self.session.execute(stmt)
        models = list(result.scalars().all())
        rosters = await self._load_rosters([m.id for m in models])
        return [self._to_domain(m, rosters[m.id]) for m in models]

    async def add(self, event: Event) -> None:
        self.session.add(self._to_model(event))
        await self.session.flush()

    async def update(self, event: Event) -> None:
        stmt = select(EventModel).where(EventModel.id == event.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.title = event.title
        model.description = event.description
        model.event_date = event.date
        model.event_time = event.time
        model.venue = event.venue
        model.image_url = event.image_url
        model.max_capacity = event.max_capacity
        model.updated_at = event.updated_at

        await self.session.flush()

    async def delete(self, event_id: UUID) -> bool:
        await self.session.execute(
            delete(event_attendees).where(event_attendees.c.event_id == event_id)
        )
        result = await self.session.execute(
            delete(EventModel).where(EventModel.id == event_id)
        )
        return bool(result.rowcount)

    async def add_attendee(self, event_id: UUID, account_id: UUID) -> None:
        await self.session.execute(
            insert(event_attendees).values(event_id=event_id, account_id=account_id)
        )

    async def remove_attendee(self, event_id: UUID, account_id: UUID) -> bool:
        result = await self.session.execute(
            delete(event_attendees).where(
                event_attendees.c.event_id == event_id,
                event_attendees.c.account_id == account_id,
            )
        )
        return bool(result.rowcount)

    async def _load_rosters(self, event_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        rosters: dict[UUID, list[UUID]] = defaultdict(list)
        if not event_ids:
            return rosters
        stmt = (
            select(event_attendees.c.event_id, event_attendees.c.account_id)
            .where(event_attendees.c.event_id.in_(event_ids))
            .order_by(event_attendees.c.added_at)
        )
        result = await self.session.execute(stmt)
        for event_id, account_id in result.all():
            rosters[event_id].append(account_id)
        return rosters

    def _to_domain(self, model: EventModel, roster: list[UUID]) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            description=model.description,
            date=model.event_date,
            time=model.event_time,
            venue=model.venue,
            image_url=model.image_url,
            organiser_id=model.organiser_id,
            max_capacity=model.max_capacity,
            registered_account_ids=list(roster),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, event: Event) -> EventModel:
        return EventModel(
            id=event.id,
            title=event.title,
            description=event.description,
            event_date=event.date,
            event_time=event.time,
            venue=event.venue,
            image_url=event.image_url,
            organiser_id=event.organiser_id,
            max_capacity=event.max_capacity,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
