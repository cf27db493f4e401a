"""Login handler.

Flow:
1. Look up account by email
2. Verify password (bcrypt, off the event loop)
3. Require a verified email
4. Open a session

Unknown email and wrong password produce the same INVALID_CREDENTIALS
error so the response does not reveal which accounts exist.
"""

import asyncio

from src.application.commands.auth_commands import Login
from src.application.dtos import AuthenticatedSession
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import LoginFailed, LoginSucceeded
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    PasswordHashingProtocol,
    SessionStoreProtocol,
)
from src.domain.value_objects import AuthContext


class LoginHandler:
    """Handler for Login command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        session_store: SessionStoreProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._session_store = session_store
        self._event_bus = event_bus

    async def handle(self, cmd: Login) -> Result[AuthenticatedSession, DomainError]:
        account = await self._account_repo.find_by_email(cmd.email)
        password_ok = account is not None and await asyncio.to_thread(
            self._password_service.verify_password,
            cmd.password,
            account.password_hash,
        )
        if account is None or not password_ok:
            return await self._fail(
                cmd.email,
                AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid credentials",
                ),
            )

        if not account.is_verified:
            return await self._fail(
                cmd.email,
                AuthenticationError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message="Please verify your email first",
                    details={"email": account.email},
                ),
            )

        context = AuthContext(
            account_id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
        )
        match await self._session_store.create(context):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=session_id):
                await self._event_bus.publish(
                    LoginSucceeded(account_id=account.id, email=account.email)
                )
                return Success(
                    value=AuthenticatedSession(context=context, session_id=session_id)
                )

    async def _fail(
        self, email: str, error: DomainError
    ) -> Result[AuthenticatedSession, DomainError]:
        await self._event_bus.publish(LoginFailed(email=email, reason=error.code.value))
        return Failure(error=error)
