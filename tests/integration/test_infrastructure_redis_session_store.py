"""Integration tests for RedisSessionStore.

Architecture:
- Runs against fakeredis, which implements the Redis protocol in process
- A broken client (patched to raise RedisError) covers the failure mapping
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fakeredis import FakeAsyncRedis
from redis.exceptions import ConnectionError as RedisConnectionError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import AccountRole
from src.domain.value_objects import AuthContext
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError
from src.infrastructure.sessions import RedisSessionStore
from src.infrastructure.sessions.redis_session_store import SESSION_KEY_PREFIX

TTL_SECONDS = 7 * 24 * 60 * 60


@pytest_asyncio.fixture
async def redis_client():
    client = FakeAsyncRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def session_store(redis_client):
    return RedisSessionStore(redis_client, ttl_seconds=TTL_SECONDS)


@pytest.fixture
def context():
    return AuthContext(
        account_id=uuid7(),
        name="Dr. Sarah Johnson",
        email="admin@college.edu",
        role=AccountRole.ADMIN,
    )


@pytest.mark.integration
class TestRedisSessionStore:
    async def test_create_then_get(self, session_store, context):
        created = await session_store.create(context)

        assert isinstance(created, Success)
        fetched = await session_store.get(created.value)
        assert fetched == Success(value=context)

    async def test_session_ids_are_unique_and_long(self, session_store, context):
        first = (await session_store.create(context)).value
        second = (await session_store.create(context)).value

        assert first != second
        assert len(first) >= 43

    async def test_session_expires_with_cookie_lifetime(
        self, session_store, redis_client, context
    ):
        session_id = (await session_store.create(context)).value

        ttl = await redis_client.ttl(f"{SESSION_KEY_PREFIX}{session_id}")

        assert 0 < ttl <= TTL_SECONDS

    async def test_unknown_session_resolves_to_none(self, session_store):
        assert await session_store.get("no-such-session") == Success(value=None)

    async def test_unreadable_session_resolves_to_none(self, session_store, redis_client):
        await redis_client.set(f"{SESSION_KEY_PREFIX}corrupt", "{not json")
        await redis_client.set(
            f"{SESSION_KEY_PREFIX}wrong-role",
            '{"account_id": "%s", "name": "x", "email": "x@y.z", "role": "dean"}'
            % uuid7(),
        )

        assert await session_store.get("corrupt") == Success(value=None)
        assert await session_store.get("wrong-role") == Success(value=None)

    async def test_delete(self, session_store, context):
        session_id = (await session_store.create(context)).value

        assert await session_store.delete(session_id) == Success(value=True)
        assert await session_store.delete(session_id) == Success(value=False)
        assert await session_store.get(session_id) == Success(value=None)

    async def test_redis_failure_maps_to_cache_error(self, context):
        broken = AsyncMock()
        broken.setex = AsyncMock(side_effect=RedisConnectionError("connection refused"))
        broken.get = AsyncMock(side_effect=RedisConnectionError("connection refused"))
        store = RedisSessionStore(broken, ttl_seconds=60)

        created = await store.create(context)
        fetched = await store.get("anything")

        assert isinstance(created, Failure)
        assert isinstance(created.error, CacheError)
        assert created.error.code == ErrorCode.SESSION_STORE_FAILED
        assert created.error.infrastructure_code == InfrastructureErrorCode.CACHE_SET_ERROR
        assert fetched.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR
