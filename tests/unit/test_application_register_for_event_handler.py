"""Unit tests for RegisterForEventHandler.

Tests cover:
- Successful registration writes the ledger row and both rosters, commits
  once, schedules the confirmation email and emits RegistrationCreated
- QR payload contents
- Duplicate registration, full event, missing event
- Token generation failure leaves no trace
- Concurrency: racing requests for the same (account, event) pair produce
  exactly one registration, and racing accounts never overfill an event
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands import RegisterForEvent
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.events import (
    RegistrationAttempted,
    RegistrationCreated,
    RegistrationFailed,
)
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import TokenGenerationError
from tests.utils.factories import make_account, make_auth, make_event
from tests.utils.fakes import FAKE_QR_CODE, FakeTokenGenerator


@pytest.fixture
def token_generator():
    return FakeTokenGenerator()


@pytest.fixture
def notifications():
    dispatcher = Mock()
    dispatcher.dispatch_confirmation = Mock()
    return dispatcher


@pytest.fixture
def handler(
    event_repo,
    registration_repo,
    account_repo,
    uow,
    token_generator,
    notifications,
    event_bus,
):
    return RegisterForEventHandler(
        event_repo=event_repo,
        registration_repo=registration_repo,
        account_repo=account_repo,
        uow=uow,
        token_generator=token_generator,
        notifications=notifications,
        event_bus=event_bus,
    )


@pytest.fixture
def event(store, admin):
    event = make_event(organiser_id=admin.id, max_capacity=3)
    store.events[event.id] = event
    return event


@pytest.mark.unit
class TestRegisterForEventSuccess:
    async def test_registration_updates_ledger_and_both_rosters(
        self, handler, student, event, store, uow
    ):
        # Act
        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        # Assert
        assert isinstance(result, Success)
        registration = result.value.registration
        assert store.registrations[registration.id].account_id == student.id
        assert registration.qr_code == FAKE_QR_CODE
        assert registration.attended is False
        assert store.events[event.id].registered_account_ids == [student.id]
        assert store.accounts[student.id].registered_event_ids == [event.id]
        assert uow.commits == 1
        assert uow.rollbacks == 0

    async def test_returned_event_includes_new_attendee(self, handler, student, event):
        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        assert result.value.event.registered_count == 1
        assert result.value.event.seats_remaining == 2

    async def test_qr_payload_describes_registration(
        self, handler, student, event, token_generator
    ):
        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        payload = token_generator.payloads[0]
        assert payload.registration_id == result.value.registration.id
        assert payload.account_email == student.email
        assert payload.event_title == event.title
        assert payload.event_venue == event.venue
        assert payload.issued_at == result.value.registration.registered_at

    async def test_confirmation_email_is_scheduled_after_commit(
        self, handler, student, event, notifications
    ):
        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        auth, dispatched_event, registration = (
            notifications.dispatch_confirmation.call_args.args
        )
        assert auth.account_id == student.id
        assert dispatched_event.id == event.id
        assert registration == result.value.registration

    async def test_events_emitted(self, handler, student, event, event_bus):
        await handler.handle(RegisterForEvent(auth=make_auth(student), event_id=event.id))

        assert len(event_bus.of_type(RegistrationAttempted)) == 1
        created = event_bus.of_type(RegistrationCreated)
        assert created[0].account_id == student.id
        assert event_bus.of_type(RegistrationFailed) == []


@pytest.mark.unit
class TestRegisterForEventFailures:
    async def test_missing_event(self, handler, student, notifications, event_bus):
        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND
        notifications.dispatch_confirmation.assert_not_called()
        assert event_bus.of_type(RegistrationFailed)[0].reason == "event_not_found"

    async def test_second_registration_is_rejected(
        self, handler, student, event, store, uow
    ):
        auth = make_auth(student)
        await handler.handle(RegisterForEvent(auth=auth, event_id=event.id))

        result = await handler.handle(RegisterForEvent(auth=auth, event_id=event.id))

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS
        assert len(store.registrations) == 1
        assert store.events[event.id].registered_account_ids == [student.id]
        assert uow.commits == 1

    async def test_full_event_is_rejected(self, handler, event, store, token_generator):
        for _ in range(event.max_capacity):
            account = make_account()
            store.accounts[account.id] = account
            await handler.handle(
                RegisterForEvent(auth=make_auth(account), event_id=event.id)
            )
        latecomer = make_account()
        store.accounts[latecomer.id] = latecomer

        result = await handler.handle(
            RegisterForEvent(auth=make_auth(latecomer), event_id=event.id)
        )

        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.EVENT_FULL
        assert result.error.details == {"max_capacity": 3}
        assert len(token_generator.payloads) == 3
        assert len(store.events[event.id].registered_account_ids) == 3

    async def test_token_failure_writes_nothing(
        self,
        event_repo,
        registration_repo,
        account_repo,
        uow,
        notifications,
        event_bus,
        student,
        event,
        store,
    ):
        token_generator = AsyncMock()
        token_generator.generate = AsyncMock(
            return_value=Failure(
                error=TokenGenerationError(
                    code=ErrorCode.TOKEN_GENERATION_FAILED,
                    message="Could not generate the registration QR code",
                    infrastructure_code=InfrastructureErrorCode.QR_ENCODING_FAILED,
                )
            )
        )
        handler = RegisterForEventHandler(
            event_repo,
            registration_repo,
            account_repo,
            uow,
            token_generator,
            notifications,
            event_bus,
        )

        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        assert result.error.code == ErrorCode.TOKEN_GENERATION_FAILED
        assert store.registrations == {}
        assert store.events[event.id].registered_account_ids == []
        assert uow.commits == 0
        notifications.dispatch_confirmation.assert_not_called()

    async def test_insert_conflict_rolls_back(
        self, handler, registration_repo, student, event, uow, store
    ):
        """A racing duplicate caught by the unique index is a conflict too."""
        registration_repo.find_by_account_and_event = AsyncMock(return_value=None)
        auth = make_auth(student)
        await handler.handle(RegisterForEvent(auth=auth, event_id=event.id))

        result = await handler.handle(RegisterForEvent(auth=auth, event_id=event.id))

        assert result.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS
        assert uow.rollbacks == 1
        assert store.events[event.id].registered_account_ids == [student.id]


@pytest.mark.unit
class TestRegisterForEventConcurrency:
    async def test_racing_requests_for_same_pair_create_one_registration(
        self, handler, student, event, store, notifications
    ):
        auth = make_auth(student)

        results = await asyncio.gather(
            *(
                handler.handle(RegisterForEvent(auth=auth, event_id=event.id))
                for _ in range(5)
            )
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert len(failures) == 4
        assert {f.error.code for f in failures} == {ErrorCode.REGISTRATION_ALREADY_EXISTS}
        assert len(store.registrations) == 1
        assert store.events[event.id].registered_account_ids == [student.id]
        assert store.accounts[student.id].registered_event_ids == [event.id]
        assert notifications.dispatch_confirmation.call_count == 1

    async def test_racing_requests_from_different_accounts_all_register(
        self, handler, store, admin
    ):
        event = make_event(organiser_id=admin.id, max_capacity=10)
        store.events[event.id] = event
        accounts = [make_account() for _ in range(4)]
        for account in accounts:
            store.accounts[account.id] = account

        results = await asyncio.gather(
            *(
                handler.handle(
                    RegisterForEvent(auth=make_auth(account), event_id=event.id)
                )
                for account in accounts
            )
        )

        assert all(isinstance(r, Success) for r in results)
        assert sorted(store.events[event.id].registered_account_ids) == sorted(
            a.id for a in accounts
        )

    async def test_racing_accounts_for_last_seat_fill_it_once(
        self, handler, store, admin, uow, notifications, event_bus
    ):
        """Two accounts race for a capacity-1 event.

        Verifies that:
        - Both pass the unlocked pre-check, only one gets the seat
        - The loser sees EVENT_FULL on the locked re-read and writes nothing
        - The roster never exceeds max_capacity
        """
        event = make_event(organiser_id=admin.id, max_capacity=1)
        store.events[event.id] = event
        first, second = make_account(), make_account()
        store.accounts[first.id] = first
        store.accounts[second.id] = second

        results = await asyncio.gather(
            *(
                handler.handle(
                    RegisterForEvent(auth=make_auth(account), event_id=event.id)
                )
                for account in (first, second)
            )
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert failures[0].error.code == ErrorCode.EVENT_FULL
        winner = successes[0].value.registration.account_id
        assert store.events[event.id].registered_account_ids == [winner]
        assert [r.account_id for r in store.registrations.values()] == [winner]
        loser = second.id if winner == first.id else first.id
        assert store.accounts[loser].registered_event_ids == []
        assert uow.commits == 1
        assert uow.rollbacks == 1
        assert notifications.dispatch_confirmation.call_count == 1
        assert event_bus.of_type(RegistrationFailed)[0].reason == "event_full"

    async def test_event_deleted_before_lock_is_not_found(
        self, handler, student, event, event_repo, uow, store
    ):
        event_repo.find_by_id_for_update = AsyncMock(return_value=None)

        result = await handler.handle(
            RegisterForEvent(auth=make_auth(student), event_id=event.id)
        )

        assert result.error.code == ErrorCode.EVENT_NOT_FOUND
        assert store.registrations == {}
        assert uow.rollbacks == 1
