"""EmailProtocol - port for outgoing email.

Infrastructure provides concrete implementations (SmtpEmailService,
StubEmailService). Delivery failures are returned, never raised.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Methods:
        send_otp_email: Deliver an email verification code
        send_registration_confirmation: Deliver a registration's QR code
    """

    async def send_otp_email(
        self,
        to_email: str,
        name: str,
        otp_code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        """Send an email verification code.

        Returns:
            Success(None), or Failure(ExternalServiceError) if delivery failed.
        """
        ...

    async def send_registration_confirmation(
        self,
        to_email: str,
        name: str,
        event_title: str,
        event_date: str,
        event_time: str,
        event_venue: str,
        qr_code_data_url: str,
    ) -> Result[None, DomainError]:
        """Send a registration confirmation with the QR code attached.

        Returns:
            Success(None), or Failure(ExternalServiceError) if delivery failed.
        """
        ...
