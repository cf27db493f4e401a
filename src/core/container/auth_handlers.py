"""Authentication handler dependency factories.

Request-scoped handler instances for sign-up, OTP verification, login and
logout. Each factory shares one database session between the repositories
and the unit of work it builds.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_email_service,
    get_password_service,
    get_session_store,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_handler import LoginHandler
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.application.commands.handlers.register_account_handler import (
        RegisterAccountHandler,
    )
    from src.application.commands.handlers.resend_otp_handler import (
        ResendOtpHandler,
    )
    from src.application.commands.handlers.verify_otp_handler import (
        VerifyOtpHandler,
    )
    from src.application.services import OtpService


def _build_otp_service(session: AsyncSession) -> "OtpService":
    from src.application.services import OtpService
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import AccountRepository

    return OtpService(
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        email_service=get_email_service(),
        event_bus=get_event_bus(),
        otp_ttl=timedelta(minutes=settings.otp_ttl_minutes),
    )


async def get_register_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterAccountHandler":
    """Get RegisterAccount command handler (request-scoped).

    Dependencies:
    - AccountRepository and unit of work (request-scoped, share the session)
    - OtpService (request-scoped, same session)
    - BcryptPasswordService and EventBus (app-scoped singletons)

    Usage:
        @router.post("/register")
        async def register(
            handler: RegisterAccountHandler = Depends(get_register_account_handler),
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_account_handler import (
        RegisterAccountHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import AccountRepository

    return RegisterAccountHandler(
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        password_service=get_password_service(),
        otp_service=_build_otp_service(session),
        event_bus=get_event_bus(),
    )


async def get_verify_otp_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyOtpHandler":
    from src.application.commands.handlers.verify_otp_handler import (
        VerifyOtpHandler,
    )
    from src.infrastructure.persistence import SqlAlchemyUnitOfWork
    from src.infrastructure.persistence.repositories import AccountRepository

    return VerifyOtpHandler(
        account_repo=AccountRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        session_store=get_session_store(),
        event_bus=get_event_bus(),
    )


async def get_resend_otp_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResendOtpHandler":
    from src.application.commands.handlers.resend_otp_handler import (
        ResendOtpHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return ResendOtpHandler(
        account_repo=AccountRepository(session=session),
        otp_service=_build_otp_service(session),
    )


async def get_login_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginHandler":
    from src.application.commands.handlers.login_handler import LoginHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return LoginHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        session_store=get_session_store(),
        event_bus=get_event_bus(),
    )


async def get_logout_handler() -> "LogoutHandler":
    """Logout only touches the session store, so no database session."""
    from src.application.commands.handlers.logout_handler import LogoutHandler

    return LogoutHandler(
        session_store=get_session_store(),
        event_bus=get_event_bus(),
    )
