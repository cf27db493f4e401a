"""Session store adapters."""

from src.infrastructure.sessions.redis_session_store import RedisSessionStore

__all__ = ["RedisSessionStore"]
