"""Stub email service for development and testing.

Logs outgoing mail instead of sending it. In development the OTP code is
included in the log so accounts can be verified without a mail server.
"""

from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email adapter that only logs.

    Attributes:
        sent: Every message "sent", as (kind, recipient, fields) tuples.
    """

    def __init__(self, logger: LoggerProtocol, *, expose_codes: bool = False) -> None:
        self._logger = logger
        self._expose_codes = expose_codes
        self.sent: list[tuple[str, str, dict[str, str]]] = []

    async def send_otp_email(
        self,
        to_email: str,
        name: str,
        otp_code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        self.sent.append(("otp", to_email, {"name": name, "otp_code": otp_code}))
        context: dict[str, str | int] = {
            "recipient": to_email,
            "expires_in_minutes": expires_in_minutes,
        }
        if self._expose_codes:
            context["otp_code"] = otp_code
        self._logger.info("stub_otp_email", **context)
        return Success(value=None)

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
        self.sent.append(
            ("confirmation", to_email, {"name": name, "event_title": event_title})
        )
        self._logger.info(
            "stub_confirmation_email",
            recipient=to_email,
            event_title=event_title,
            qr_code_bytes=len(qr_code_data_url),
        )
        return Success(value=None)
