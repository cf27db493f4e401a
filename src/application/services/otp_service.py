"""One-time password issuing and delivery.

Shared by RegisterAccount (first code) and ResendOtp (replacement code).

Flow (issue):
1. Draw a fresh code valid for ``otp_ttl``
2. Replace the account's pending OTP and persist it
3. Commit, so the code is valid even if delivery fails
4. Email the code and publish OtpIssued

A delivery failure is returned to the caller (the client can ask for a
resend); the stored code is not rolled back.
"""

from datetime import timedelta

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Account
from src.domain.events import OtpIssued
from src.domain.protocols import (
    AccountRepository,
    EmailProtocol,
    EventBusProtocol,
    UnitOfWorkProtocol,
)
from src.domain.value_objects import OneTimePassword


class OtpService:
    """Issues verification codes and sends them by email."""

    def __init__(
        self,
        account_repo: AccountRepository,
        uow: UnitOfWorkProtocol,
        email_service: EmailProtocol,
        event_bus: EventBusProtocol,
        otp_ttl: timedelta,
    ) -> None:
        self._account_repo = account_repo
        self._uow = uow
        self._email_service = email_service
        self._event_bus = event_bus
        self._otp_ttl = otp_ttl

    def new_code(self) -> OneTimePassword:
        return OneTimePassword.generate(ttl=self._otp_ttl)

    async def issue(self, account: Account) -> Result[None, DomainError]:
        """Replace the pending OTP of ``account``, persist it and email it."""
        account.replace_otp(self.new_code())
        await self._account_repo.update(account)
        await self._uow.commit()
        return await self.deliver(account)

    async def deliver(self, account: Account) -> Result[None, DomainError]:
        """Email the account's pending OTP.

        The account must already carry a committed pending OTP.
        """
        otp = account.pending_otp
        if otp is None:
            raise ValueError("Account has no pending OTP to deliver")

        result = await self._email_service.send_otp_email(
            to_email=account.email,
            name=account.name,
            otp_code=otp.code,
            expires_in_minutes=int(self._otp_ttl.total_seconds() // 60),
        )
        delivered = isinstance(result, Success)
        await self._event_bus.publish(
            OtpIssued(account_id=account.id, email=account.email, delivered=delivered)
        )

        match result:
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(value=None)
