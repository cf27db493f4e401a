"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Database (PostgreSQL via asyncpg, SQLite in tests)
- Password hashing (bcrypt)
- Email (SMTP in production, stub elsewhere)
- QR token generation
- Image storage (local media directory)
- Session store (Redis)
- Notification dispatcher (background confirmation emails)

Request-scoped:
- Database session
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.application.services import NotificationDispatcher
    from src.domain.protocols import (
        EmailProtocol,
        ImageStorageProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        SessionStoreProtocol,
        TokenGeneratorProtocol,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable, coloured)
    - testing/ci/production: ConsoleAdapter (JSON lines)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Database (Application-Scoped engine, Request-Scoped session)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Handlers commit through the unit of work; the session is rolled back on
    exception and always closed.

    Usage:
        @router.post("/registrations")
        async def register(
            session: AsyncSession = Depends(get_db_session),
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from BCRYPT_ROUNDS (12 by default, 4 in tests).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Container owns factory logic and picks the adapter from ENVIRONMENT:
        - development/testing/ci: StubEmailService (logs, never sends)
        - production: SmtpEmailService (aiosmtplib)
    """
    from src.infrastructure.email import SmtpEmailService, StubEmailService

    if settings.is_production:
        return SmtpEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            from_address=settings.email_from_address,
            from_name=settings.email_from_name,
            use_tls=settings.smtp_use_tls,
            logger=get_logger(),
        )
    return StubEmailService(logger=get_logger(), expose_codes=settings.is_development)


# ============================================================================
# Registration Token + Image Storage (Application-Scoped)
# ============================================================================


@lru_cache()
def get_token_generator() -> "TokenGeneratorProtocol":
    from src.infrastructure.tokens import QrTokenGenerator

    return QrTokenGenerator(
        logger=get_logger(),
        fill_color=settings.qr_fill_color,
        size_px=settings.qr_size_px,
    )


@lru_cache()
def get_image_storage() -> "ImageStorageProtocol":
    from src.infrastructure.storage import LocalImageStorage

    return LocalImageStorage(
        media_root=settings.media_root,
        media_url_prefix=settings.media_url_prefix,
        logger=get_logger(),
    )


# ============================================================================
# Sessions (Application-Scoped)
# ============================================================================


@lru_cache()
def get_redis() -> "Redis":
    """Get Redis client singleton with a shared connection pool."""
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_session_store() -> "SessionStoreProtocol":
    from src.infrastructure.sessions import RedisSessionStore

    return RedisSessionStore(
        redis_client=get_redis(),
        ttl_seconds=settings.session_ttl_days * 24 * 60 * 60,
    )


# ============================================================================
# Notifications (Application-Scoped)
# ============================================================================


@lru_cache()
def get_notification_dispatcher() -> "NotificationDispatcher":
    """Get the notification dispatcher singleton.

    One instance per process so that shutdown can drain every pending
    confirmation email.
    """
    from src.application.services import NotificationDispatcher

    return NotificationDispatcher(
        email_service=get_email_service(),
        logger=get_logger(),
    )
