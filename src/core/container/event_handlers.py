"""Event catalog handler dependency factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_image_storage,
    get_logger,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.application.commands.handlers.delete_event_handler import (
        DeleteEventHandler,
    )
    from src.application.commands.handlers.update_event_handler import (
        UpdateEventHandler,
    )
    from src.application.queries.handlers.event_query_handlers import (
        GetEventHandler,
        IsEventOrganiserHandler,
        ListEventsHandler,
    )


# ============================================================================
# Queries
# ============================================================================


async def get_list_events_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListEventsHandler":
    from src.application.queries.handlers.event_query_handlers import (
        ListEventsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        EventRepository,
    )

    return ListEventsHandler(
        event_repo=EventRepository(session=session),
        account_repo=AccountRepository(session=session),
    )


async def get_get_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetEventHandler":
    from src.application.queries.handlers.event_query_handlers import (
        GetEventHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        EventRepository,
    )

    return GetEventHandler(
        event_repo=EventRepository(session=session),
        account_repo=AccountRepository(session=session),
    )


async def get_is_event_organiser_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "IsEventOrganiserHandler":
    from src.application.queries.handlers.event_query_handlers import (
        IsEventOrganiserHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return IsEventOrganiserHandler(event_repo=EventRepository(session=session))


# ============================================================================
# Commands
# ============================================================================


async def get_create_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateEventHandler":
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import EventRepository

    return CreateEventHandler(
        event_repo=EventRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
        default_capacity=settings.default_event_capacity,
    )


async def get_update_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateEventHandler":
    from src.application.commands.handlers.update_event_handler import (
        UpdateEventHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import EventRepository

    return UpdateEventHandler(
        event_repo=EventRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_delete_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteEventHandler":
    """Get DeleteEvent command handler (request-scoped).

    Needs all three repositories because deletion cascades to
    registrations and both rosters.
    """
    from src.application.commands.handlers.delete_event_handler import (
        DeleteEventHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        EventRepository,
        RegistrationRepository,
    )

    return DeleteEventHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        image_storage=get_image_storage(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )
