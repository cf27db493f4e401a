"""Fixtures for integration tests against a real SQLite database.

Each test gets a fresh database file under ``tmp_path`` with the schema
created from the ORM models, so tests never see each other's rows.
"""

import pytest_asyncio

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    EventRepository,
    RegistrationRepository,
)
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a Database bound to a throwaway SQLite file.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'campus-events.db'}")
    await database.create_all()
    yield database
    await database.drop_all()
    await database.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    async with test_database.get_session() as session:
        yield session


@pytest_asyncio.fixture
async def sql_repos(db_session):
    """Repositories and unit of work sharing one session, as in a request."""
    return (
        AccountRepository(db_session),
        EventRepository(db_session),
        RegistrationRepository(db_session),
        SqlAlchemyUnitOfWork(db_session),
    )
