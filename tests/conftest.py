"""Pytest configuration shared by every test package.

Environment variables are set before anything from ``src`` is imported,
because ``src.core.config.settings`` is built at import time:
1. ENVIRONMENT=testing (JSON logs, stub email, insecure cookies allowed)
2. BCRYPT_ROUNDS=4 so hashing in tests is fast
3. MEDIA_ROOT points at a throwaway directory

Fixtures provide:
- Mock cross-cutting services (logger, event bus)
- An in-memory store with fake repositories and unit of work
- Ready-made student and admin accounts
"""

import os
import tempfile

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="campus-events-media-"))
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402

from src.domain.entities import Account  # noqa: E402
from tests.utils.factories import make_account, make_admin  # noqa: E402
from tests.utils.fakes import (  # noqa: E402
    FakeAccountRepository,
    FakeEventRepository,
    FakeRegistrationRepository,
    FakeUnitOfWork,
    InMemoryStore,
    RecordingEventBus,
)


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger with the LoggerProtocol methods.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture
def mock_event_bus():
    """Provide an AsyncMock event bus (publish is awaited)."""
    event_bus = AsyncMock()
    event_bus.publish = AsyncMock(return_value=None)
    return event_bus


# =============================================================================
# In-memory fakes
# =============================================================================


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def account_repo(store: InMemoryStore) -> FakeAccountRepository:
    return FakeAccountRepository(store)


@pytest.fixture
def event_repo(store: InMemoryStore) -> FakeEventRepository:
    return FakeEventRepository(store)


@pytest.fixture
def registration_repo(store: InMemoryStore) -> FakeRegistrationRepository:
    return FakeRegistrationRepository(store)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def event_bus() -> RecordingEventBus:
    return RecordingEventBus()


@pytest.fixture
def student(store: InMemoryStore) -> Account:
    """Verified student already stored in the in-memory store."""
    account = make_account()
    store.accounts[account.id] = account
    return account


@pytest.fixture
def admin(store: InMemoryStore) -> Account:
    """Verified admin already stored in the in-memory store."""
    account = make_admin(email="admin@college.edu")
    store.accounts[account.id] = account
    return account
