"""Registration handler for account sign-up.

Flow:
1. Emit AccountRegistrationAttempted event
2. Name, email and password are already validated by Annotated types
3. Check email uniqueness
4. Hash password (bcrypt, off the event loop)
5. Create unverified Account with a fresh OTP
6. Insert and commit (the unique email index settles racing sign-ups)
7. Email the OTP
8. Emit AccountRegistrationSucceeded event
9. Return Success(RegisteredAccount)

On failure:
- Emit AccountRegistrationFailed event
- Return Failure(error)

If only step 7 fails the account still exists; the caller sees
EMAIL_DELIVERY_FAILED and can use resend-otp.
"""

import asyncio
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterAccount
from src.application.dtos import RegisteredAccount
from src.application.services import OtpService
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Account
from src.domain.events import (
    AccountRegistrationAttempted,
    AccountRegistrationFailed,
    AccountRegistrationSucceeded,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)


class RegisterAccountHandler:
    """Handler for RegisterAccount command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        otp_service: OtpService,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            account_repo: Account repository for persistence.
            uow: Unit of work owning the transaction.
            password_service: Password hashing service.
            otp_service: Issues and emails the verification code.
            event_bus: Event bus for publishing domain events.
        """
        self._account_repo = account_repo
        self._uow = uow
        self._password_service = password_service
        self._otp_service = otp_service
        self._event_bus = event_bus

    async def handle(
        self, cmd: RegisterAccount
    ) -> Result[RegisteredAccount, DomainError]:
        """Handle account registration.

        Returns:
            Success(RegisteredAccount) when the account was created and the
            OTP was sent.
            Failure(ConflictError) if the email is taken.
            Failure(ExternalServiceError) if the OTP email could not be sent.
        """
        await self._event_bus.publish(AccountRegistrationAttempted(email=cmd.email))

        existing = await self._account_repo.find_by_email(cmd.email)
        if existing is not None:
            return await self._fail(
                cmd.email,
                ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="An account with this email already exists",
                    resource_type="Account",
                    conflicting_field="email",
                ),
            )

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.password
        )

        now = datetime.now(UTC)
        account = Account(
            id=uuid7(),
            name=cmd.name,
            email=cmd.email,
            password_hash=password_hash,
            role=cmd.role,
            is_verified=False,
            pending_otp=self._otp_service.new_code(),
            created_at=now,
            updated_at=now,
        )

        add_result = await self._account_repo.add(account)
        if isinstance(add_result, Failure):
            await self._uow.rollback()
            return await self._fail(cmd.email, add_result.error)
        await self._uow.commit()

        await self._event_bus.publish(
            AccountRegistrationSucceeded(
                account_id=account.id,
                email=account.email,
                role=account.role.value,
            )
        )

        match await self._otp_service.deliver(account):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(
                    value=RegisteredAccount(account_id=account.id, email=account.email)
                )

    async def _fail(
        self, email: str, error: DomainError
    ) -> Result[RegisteredAccount, DomainError]:
        await self._event_bus.publish(
            AccountRegistrationFailed(email=email, reason=error.code.value)
        )
        return Failure(error=error)
