"""Registration ledger flow against the real SQLAlchemy repositories.

Tests cover:
- Register -> check in -> cancel, with both rosters kept in step
- A duplicate insert that slips past the pre-check is caught by the unique
  constraint and rolled back without disturbing committed data
- Deleting an event removes its registrations and roster entries
- Two accounts racing for the last seat on separate connections fill it once
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands import (
    CancelRegistration,
    CheckInAttendee,
    DeleteEvent,
    RegisterForEvent,
)
from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.check_in_attendee_handler import (
    CheckInAttendeeHandler,
)
from src.application.commands.handlers.delete_event_handler import DeleteEventHandler
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    EventRepository,
    RegistrationRepository,
)
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from tests.utils.factories import make_account, make_admin, make_auth, make_event
from tests.utils.fakes import FakeTokenGenerator, RecordingEventBus


@pytest.fixture
def token_generator():
    return FakeTokenGenerator()


@pytest.fixture
def register_handler(sql_repos, token_generator):
    accounts, events, registrations, uow = sql_repos
    return RegisterForEventHandler(
        event_repo=events,
        registration_repo=registrations,
        account_repo=accounts,
        uow=uow,
        token_generator=token_generator,
        notifications=Mock(),
        event_bus=RecordingEventBus(),
    )


async def _seed(sql_repos):
    accounts, events, _, uow = sql_repos
    admin, student = make_admin(), make_account()
    await accounts.add(admin)
    await accounts.add(student)
    event = make_event(organiser_id=admin.id, max_capacity=2)
    await events.add(event)
    await uow.commit()
    return admin, student, event


@pytest.mark.integration
class TestRegistrationFlow:
    async def test_register_check_in_cancel(
        self, sql_repos, register_handler, token_generator, mock_logger
    ):
        accounts, events, registrations, uow = sql_repos
        admin, student, event = await _seed(sql_repos)

        # Register
        registered = await register_handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )
        assert isinstance(registered, Success)
        registration_id = registered.value.registration.id
        assert (await events.find_by_id(event.id)).registered_account_ids == [student.id]
        assert (await accounts.find_by_id(student.id)).registered_event_ids == [event.id]

        # Check in with the payload the QR code encodes
        check_in = CheckInAttendeeHandler(registrations, events, uow, RecordingEventBus())
        checked = await check_in.handle(
            CheckInAttendee(
                auth=make_auth(admin),
                payload=token_generator.payloads[0].to_json(),
                event_id=event.id,
            )
        )
        assert checked.value.attendee_name == student.name
        assert (await registrations.find_by_id(registration_id)).attended is True

        # Cancel
        cancel = CancelRegistrationHandler(
            registrations, events, accounts, uow, RecordingEventBus(), mock_logger
        )
        cancelled = await cancel.handle(
            CancelRegistration(auth=make_auth(student), registration_id=registration_id)
        )
        assert cancelled == Success(value=None)
        assert await registrations.find_by_id(registration_id) is None
        assert (await events.find_by_id(event.id)).registered_account_ids == []
        assert (await accounts.find_by_id(student.id)).registered_event_ids == []
        mock_logger.error.assert_not_called()

    async def test_duplicate_caught_by_unique_constraint(
        self, sql_repos, register_handler
    ):
        _, events, registrations, _ = sql_repos
        _, student, event = await _seed(sql_repos)
        auth = make_auth(student)
        await register_handler.handle(RegisterForEvent(auth=auth, event_id=event.id))
        registrations.find_by_account_and_event = AsyncMock(return_value=None)

        result = await register_handler.handle(
            RegisterForEvent(auth=auth, event_id=event.id)
        )

        assert result.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS
        assert len(await registrations.list_by_account(student.id)) == 1
        assert (await events.find_by_id(event.id)).registered_account_ids == [student.id]

    async def test_full_event(self, sql_repos, register_handler):
        accounts, _, _, uow = sql_repos
        _, student, event = await _seed(sql_repos)
        others = [make_account(), make_account()]
        for account in others:
            await accounts.add(account)
        await uow.commit()
        for account in others:
            await register_handler.handle(
                RegisterForEvent(auth=make_auth(account), event_id=event.id)
            )

        result = await register_handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        assert result.error.code == ErrorCode.EVENT_FULL

    async def test_delete_event_cascades(self, sql_repos, register_handler, mock_logger):
        accounts, events, registrations, uow = sql_repos
        admin, student, event = await _seed(sql_repos)
        await register_handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )
        image_storage = AsyncMock()
        image_storage.release = AsyncMock(return_value=Success(value=False))

        result = await DeleteEventHandler(
            events,
            registrations,
            accounts,
            uow,
            image_storage,
            RecordingEventBus(),
            mock_logger,
        ).handle(DeleteEvent(auth=make_auth(admin), event_id=event.id))

        assert result == Success(value=1)
        assert await events.find_by_id(event.id) is None
        assert await registrations.list_by_account(student.id) == []
        assert (await accounts.find_by_id(student.id)).registered_event_ids == []


@pytest.mark.integration
class TestCapacityUnderConcurrency:
    async def test_two_connections_race_for_last_seat(
        self, sql_repos, test_database, token_generator
    ):
        """Each request gets its own session, as it would per HTTP request.

        Verifies that:
        - Exactly one registration succeeds on a capacity-1 event
        - The other is rejected with EVENT_FULL and leaves no rows behind
        """
        accounts, events, registrations, uow = sql_repos
        admin = make_admin()
        first, second = make_account(), make_account()
        for account in (admin, first, second):
            await accounts.add(account)
        event = make_event(organiser_id=admin.id, max_capacity=1)
        await events.add(event)
        await uow.commit()

        async def register(account):
            async with test_database.get_session() as session:
                handler = RegisterForEventHandler(
                    event_repo=EventRepository(session),
                    registration_repo=RegistrationRepository(session),
                    account_repo=AccountRepository(session),
                    uow=SqlAlchemyUnitOfWork(session),
                    token_generator=token_generator,
                    notifications=Mock(),
                    event_bus=RecordingEventBus(),
                )
                return await handler.handle(
                    RegisterForEvent(auth=make_auth(account), event_id=event.id)
                )

        results = await asyncio.gather(register(first), register(second))

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert [f.error.code for f in failures] == [ErrorCode.EVENT_FULL]
        winner = successes[0].value.registration.account_id
        assert (await events.find_by_id(event.id)).registered_account_ids == [winner]
        loser = second if winner == first.id else first
        assert await registrations.list_by_account(loser.id) == []
        assert (await accounts.find_by_id(loser.id)).registered_event_ids == []
