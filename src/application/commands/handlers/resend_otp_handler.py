"""Resend OTP handler.

Replaces the pending code of an unverified account; the previous code stops
working immediately.
"""

from src.application.commands.auth_commands import ResendOtp
from src.application.services import OtpService
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result
from src.domain.protocols import AccountRepository


class ResendOtpHandler:
    """Handler for ResendOtp command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        otp_service: OtpService,
    ) -> None:
        self._account_repo = account_repo
        self._otp_service = otp_service

    async def handle(self, cmd: ResendOtp) -> Result[None, DomainError]:
        """Issue and email a replacement OTP.

        Returns:
            Success(None) once the new code has been emailed.
            Failure(NotFoundError) for an unknown email.
            Failure(ValidationError) if the account is already verified.
            Failure(ExternalServiceError) if the email could not be sent.
        """
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="User not found",
                    resource_type="Account",
                    resource_id=cmd.email,
                )
            )
        if account.is_verified:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ACCOUNT_ALREADY_VERIFIED,
                    message="Email already verified",
                    field="email",
                )
            )
        return await self._otp_service.issue(account)
