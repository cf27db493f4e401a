"""Redis-backed session store.

Sessions are stored as JSON under ``session:{id}`` with a TTL equal to the
cookie lifetime, so Redis expires them without a sweeper. Session ids are
256-bit random URL-safe strings.

Architecture:
- Implements SessionStoreProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError
- Returns Result types for all operations
"""

import json
import secrets
from uuid import UUID

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountRole
from src.domain.value_objects.auth_context import AuthContext
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

SESSION_KEY_PREFIX = "session:"


class RedisSessionStore:
    """Redis implementation of SessionStoreProtocol.

    Attributes:
        _redis: Async Redis client instance.
        _ttl_seconds: Session lifetime.
    """

    def __init__(self, redis_client: Redis, ttl_seconds: int) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{SESSION_KEY_PREFIX}{session_id}"

    async def create(self, context: AuthContext) -> Result[str, DomainError]:
        session_id = secrets.token_urlsafe(32)
        value = json.dumps(
            {
                "account_id": str(context.account_id),
                "name": context.name,
                "email": context.email,
                "role": context.role.value,
            }
        )
        try:
            await self._redis.setex(self._key(session_id), self._ttl_seconds, value)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.SESSION_STORE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                    message="Could not start a session. Please try again.",
                    details={"error": str(e)},
                )
            )
        return Success(value=session_id)

    async def get(self, session_id: str) -> Result[AuthContext | None, DomainError]:
        """Resolve a session id.

        Unknown, expired and unreadable sessions all resolve to None.
        """
        try:
            raw = await self._redis.get(self._key(session_id))
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.SESSION_STORE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                    message="Could not read the session",
                    details={"error": str(e)},
                )
            )

        if raw is None:
            return Success(value=None)

        try:
            data = json.loads(raw)
            context = AuthContext(
                account_id=UUID(data["account_id"]),
                name=data["name"],
                email=data["email"],
                role=AccountRole(data["role"]),
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            return Success(value=None)

        return Success(value=context)

    async def delete(self, session_id: str) -> Result[bool, DomainError]:
        try:
            removed = await self._redis.delete(self._key(session_id))
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.SESSION_STORE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    message="Could not end the session",
                    details={"error": str(e)},
                )
            )
        return Success(value=bool(removed))
