"""Fixtures for API tests.

The FastAPI app is exercised through TestClient with every handler factory
overridden to build the real handlers on top of the in-memory fakes, so a
request runs the full router -> handler -> repository path without a
database, Redis or SMTP server.

Note: These are synchronous tests using FastAPI's TestClient.
TestClient handles the async/sync bridge automatically.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.check_in_attendee_handler import (
    CheckInAttendeeHandler,
)
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.delete_event_handler import DeleteEventHandler
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.commands.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.application.commands.handlers.resend_otp_handler import ResendOtpHandler
from src.application.commands.handlers.update_event_handler import UpdateEventHandler
from src.application.commands.handlers.verify_otp_handler import VerifyOtpHandler
from src.application.queries.handlers.event_query_handlers import (
    GetEventHandler,
    IsEventOrganiserHandler,
    ListEventsHandler,
)
from src.application.queries.handlers.registration_query_handlers import (
    CheckRegistrationHandler,
    GetRegistrationHandler,
    ListMyRegistrationsHandler,
)
from src.application.services import OtpService
from src.core import container
from src.core.config import settings
from src.core.result import Success
from src.domain.entities import Account
from src.infrastructure.email import StubEmailService
from src.infrastructure.security import BcryptPasswordService
from src.main import app
from tests.utils.factories import make_auth
from tests.utils.fakes import FakeSessionStore, FakeTokenGenerator


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def email_service(mock_logger) -> StubEmailService:
    return StubEmailService(mock_logger)


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def token_generator() -> FakeTokenGenerator:
    return FakeTokenGenerator()


@pytest.fixture
def notifications() -> Mock:
    return Mock()


@pytest.fixture
def image_storage() -> AsyncMock:
    storage = AsyncMock()
    storage.release = AsyncMock(return_value=Success(value=False))
    return storage


@pytest.fixture
def client(
    account_repo,
    event_repo,
    registration_repo,
    uow,
    event_bus,
    mock_logger,
    session_store,
    email_service,
    password_service,
    token_generator,
    notifications,
    image_storage,
):
    """TestClient whose handlers run on the in-memory fakes.

    Overrides are cleared after each test.
    """
    otp_service = OtpService(
        account_repo=account_repo,
        uow=uow,
        email_service=email_service,
        event_bus=event_bus,
        otp_ttl=timedelta(minutes=settings.otp_ttl_minutes),
    )
    handlers = {
        container.get_register_account_handler: RegisterAccountHandler(
            account_repo, uow, password_service, otp_service, event_bus
        ),
        container.get_verify_otp_handler: VerifyOtpHandler(
            account_repo, uow, session_store, event_bus
        ),
        container.get_resend_otp_handler: ResendOtpHandler(account_repo, otp_service),
        container.get_login_handler: LoginHandler(
            account_repo, password_service, session_store, event_bus
        ),
        container.get_logout_handler: LogoutHandler(session_store, event_bus),
        container.get_list_events_handler: ListEventsHandler(event_repo, account_repo),
        container.get_get_event_handler: GetEventHandler(event_repo, account_repo),
        container.get_is_event_organiser_handler: IsEventOrganiserHandler(event_repo),
        container.get_create_event_handler: CreateEventHandler(
            event_repo, uow, event_bus, settings.default_event_capacity
        ),
        container.get_update_event_handler: UpdateEventHandler(
            event_repo, uow, event_bus
        ),
        container.get_delete_event_handler: DeleteEventHandler(
            event_repo,
            registration_repo,
            account_repo,
            uow,
            image_storage,
            event_bus,
            mock_logger,
        ),
        container.get_register_for_event_handler: RegisterForEventHandler(
            event_repo,
            registration_repo,
            account_repo,
            uow,
            token_generator,
            notifications,
            event_bus,
        ),
        container.get_cancel_registration_handler: CancelRegistrationHandler(
            registration_repo, event_repo, account_repo, uow, event_bus, mock_logger
        ),
        container.get_check_in_attendee_handler: CheckInAttendeeHandler(
            registration_repo, event_repo, uow, event_bus
        ),
        container.get_list_my_registrations_handler: ListMyRegistrationsHandler(
            registration_repo, event_repo
        ),
        container.get_get_registration_handler: GetRegistrationHandler(
            registration_repo, event_repo
        ),
        container.get_check_registration_handler: CheckRegistrationHandler(
            registration_repo
        ),
    }
    for factory, handler in handlers.items():
        app.dependency_overrides[factory] = _provide(handler)
    app.dependency_overrides[container.get_session_store] = lambda: session_store

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


def _provide(handler):
    return lambda: handler


@pytest.fixture
def sign_in(client: TestClient, session_store: FakeSessionStore):
    """Put a session for ``account`` in the store and set the cookie.

    Usage:
        def test_something(client, sign_in, admin):
            sign_in(admin)
            client.post("/api/v1/events", json=...)
    """

    def _sign_in(account: Account) -> str:
        session_id = f"session-{account.id}"
        session_store.sessions[session_id] = make_auth(account)
        client.cookies.set(settings.session_cookie_name, session_id)
        return session_id

    return _sign_in
