"""OTP verification handler.

Flow:
1. Look up the account by email (NotFound)
2. Reject if already verified (ACCOUNT_ALREADY_VERIFIED)
3. Reject if there is no pending code or it does not match (OTP_INVALID)
4. Reject if the code has expired (OTP_EXPIRED)
5. Mark verified and clear the code in one update, commit
6. Open a session and return it

Verification is one-way: is_verified only ever goes from False to True, and
only through step 5.
"""

from src.application.commands.auth_commands import VerifyOtp
from src.application.dtos import AuthenticatedSession
from src.core.enums import ErrorCode
from src.core.errors import (
    DomainError,
    ExpiredError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.events import (
    AccountVerificationFailed,
    AccountVerificationSucceeded,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    SessionStoreProtocol,
    UnitOfWorkProtocol,
)
from src.domain.value_objects import AuthContext


class VerifyOtpHandler:
    """Handler for VerifyOtp command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        session_store: SessionStoreProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._uow = uow
        self._session_store = session_store
        self._event_bus = event_bus

    async def handle(self, cmd: VerifyOtp) -> Result[AuthenticatedSession, DomainError]:
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return await self._fail(
                cmd.email,
                NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="User not found",
                    resource_type="Account",
                    resource_id=cmd.email,
                ),
            )

        if account.is_verified:
            return await self._fail(
                cmd.email,
                ValidationError(
                    code=ErrorCode.ACCOUNT_ALREADY_VERIFIED,
                    message="Email already verified",
                    field="email",
                ),
            )

        otp = account.pending_otp
        if otp is None or not otp.matches(cmd.otp):
            return await self._fail(
                cmd.email,
                ValidationError(
                    code=ErrorCode.OTP_INVALID,
                    message="Invalid OTP",
                    field="otp",
                ),
            )

        if otp.is_expired():
            return await self._fail(
                cmd.email,
                ExpiredError(
                    code=ErrorCode.OTP_EXPIRED,
                    message="OTP expired. Please request a new one.",
                ),
            )

        account.mark_verified()
        await self._account_repo.update(account)
        await self._uow.commit()

        await self._event_bus.publish(
            AccountVerificationSucceeded(account_id=account.id, email=account.email)
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
                return Success(
                    value=AuthenticatedSession(context=context, session_id=session_id)
                )

    async def _fail(
        self, email: str, error: DomainError
    ) -> Result[AuthenticatedSession, DomainError]:
        await self._event_bus.publish(
            AccountVerificationFailed(email=email, reason=error.code.value)
        )
        return Failure(error=error)
