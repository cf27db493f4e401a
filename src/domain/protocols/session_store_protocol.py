"""SessionStoreProtocol - port for server-side login sessions.

A session maps an opaque id (carried in an HttpOnly cookie) to the caller's
AuthContext. Implementations expire sessions on their own.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects.auth_context import AuthContext


class SessionStoreProtocol(Protocol):
    """Session store protocol (port).

    Implementations:
        - RedisSessionStore: src/infrastructure/sessions/redis_session_store.py
    """

    async def create(self, context: AuthContext) -> Result[str, DomainError]:
        """Open a session.

        Returns:
            Success with the new session id.
        """
        ...

    async def get(self, session_id: str) -> Result[AuthContext | None, DomainError]:
        """Resolve a session id.

        Returns:
            Success(AuthContext), Success(None) if unknown or expired.
        """
        ...

    async def delete(self, session_id: str) -> Result[bool, DomainError]:
        """Close a session.

        Returns:
            Success(True) if a session was removed.
        """
        ...
