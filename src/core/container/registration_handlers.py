"""Registration ledger handler dependency factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_notification_dispatcher,
    get_token_generator,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_registration_handler import (
        CancelRegistrationHandler,
    )
    from src.application.commands.handlers.check_in_attendee_handler import (
        CheckInAttendeeHandler,
    )
    from src.application.commands.handlers.register_for_event_handler import (
        RegisterForEventHandler,
    )
    from src.application.queries.handlers.registration_query_handlers import (
        CheckRegistrationHandler,
        GetRegistrationHandler,
        ListMyRegistrationsHandler,
    )


async def get_register_for_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterForEventHandler":
    """Get RegisterForEvent command handler (request-scoped).

    Dependencies:
    - Event, Registration and Account repositories plus unit of work, all on
      one session so the ledger row and both rosters commit together
    - QrTokenGenerator, NotificationDispatcher and EventBus (app-scoped)
    """
    from src.application.commands.handlers.register_for_event_handler import (
        RegisterForEventHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        EventRepository,
        RegistrationRepository,
    )

    return RegisterForEventHandler(
        event_repo=EventRepository(session=session),
        registration_repo=RegistrationRepository(session=session),
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        token_generator=get_token_generator(),
        notifications=get_notification_dispatcher(),
        event_bus=get_event_bus(),
    )


async def get_cancel_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CancelRegistrationHandler":
    from src.application.commands.handlers.cancel_registration_handler import (
        CancelRegistrationHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        EventRepository,
        RegistrationRepository,
    )

    return CancelRegistrationHandler(
        registration_repo=RegistrationRepository(session=session),
        event_repo=EventRepository(session=session),
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_check_in_attendee_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CheckInAttendeeHandler":
    from src.application.commands.handlers.check_in_attendee_handler import (
        CheckInAttendeeHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return CheckInAttendeeHandler(
        registration_repo=RegistrationRepository(session=session),
        event_repo=EventRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_list_my_registrations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListMyRegistrationsHandler":
    from src.application.queries.handlers.registration_query_handlers import (
        ListMyRegistrationsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return ListMyRegistrationsHandler(
        registration_repo=RegistrationRepository(session=session),
        event_repo=EventRepository(session=session),
    )


async def get_get_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetRegistrationHandler":
    from src.application.queries.handlers.registration_query_handlers import (
        GetRegistrationHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return GetRegistrationHandler(
        registration_repo=RegistrationRepository(session=session),
        event_repo=EventRepository(session=session),
    )


async def get_check_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CheckRegistrationHandler":
    from src.application.queries.handlers.registration_query_handlers import (
        CheckRegistrationHandler,
    )
    from src.infrastructure.persistence.repositories import RegistrationRepository

    return CheckRegistrationHandler(
        registration_repo=RegistrationRepository(session=session),
    )
