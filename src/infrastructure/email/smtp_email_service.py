"""SMTP email service (production adapter).

Sends multipart email through an SMTP relay with aiosmtplib. Registration
confirmations carry the QR code as an inline image part referenced by
Content-ID, since most mail clients refuse ``data:`` image sources.
"""

import base64
from email.mime.image import MIMEImage
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

import aiosmtplib

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email import templates
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import ExternalServiceError

DATA_URL_PREFIX = "data:image/png;base64,"


class SmtpEmailService:
    """Email adapter backed by an SMTP relay.

    Implements EmailProtocol structurally.

    Example:
        >>> service = SmtpEmailService(
        ...     host="smtp.gmail.com", port=587,
        ...     username="events@college.edu", password="app-password",
        ...     from_address="events@college.edu",
        ...     from_name="College Event Manager",
        ...     logger=get_logger(),
        ... )
        >>> await service.send_otp_email("s@college.edu", "Sam", "042517", 10)
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        from_address: str,
        from_name: str,
        logger: LoggerProtocol,
        use_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._from_address = from_address
        self._from_name = from_name
        self._use_tls = use_tls
        self._timeout = timeout
        self._logger = logger

    async def send_otp_email(
        self,
        to_email: str,
        name: str,
        otp_code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        message = self._new_message(to_email, templates.otp_subject(), "alternative")
        message.attach(
            MIMEText(templates.otp_text(name, otp_code, expires_in_minutes), "plain")
        )
        message.attach(
            MIMEText(templates.otp_html(name, otp_code, expires_in_minutes), "html")
        )
        return await self._send(message, to_email=to_email, kind="otp")

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
        """Send a confirmation with the QR code as an inline attachment."""
        message = self._new_message(
            to_email, templates.confirmation_subject(event_title), "related"
        )

        body = MIMEMultipart("alternative")
        body.attach(
            MIMEText(
                templates.confirmation_text(
                    name, event_title, event_date, event_time, event_venue
                ),
                "plain",
            )
        )
        body.attach(
            MIMEText(
                templates.confirmation_html(
                    name, event_title, event_date, event_time, event_venue
                ),
                "html",
            )
        )
        message.attach(body)

        if qr_code_data_url.startswith(DATA_URL_PREFIX):
            image = MIMEImage(
                base64.b64decode(qr_code_data_url.removeprefix(DATA_URL_PREFIX)),
                _subtype="png",
            )
            image.add_header("Content-ID", f"<{templates.QR_CONTENT_ID}>")
            image.add_header(
                "Content-Disposition", "inline", filename="registration-qr.png"
            )
            message.attach(image)

        return await self._send(message, to_email=to_email, kind="confirmation")

    def _new_message(self, to_email: str, subject: str, subtype: str) -> MIMEMultipart:
        message = MIMEMultipart(subtype)
        message["From"] = formataddr((self._from_name, self._from_address))
        message["To"] = to_email
        message["Subject"] = subject
        return message

    async def _send(
        self, message: MIMEMultipart, *, to_email: str, kind: str
    ) -> Result[None, DomainError]:
        try:
            await aiosmtplib.send(
                message,
                hostname=self._host,
                port=self._port,
                username=self._username,
                password=self._password,
                start_tls=self._use_tls,
                timeout=self._timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            self._logger.error(
                "email_send_failed",
                error=e,
                email_kind=kind,
                recipient=to_email,
            )
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="Email could not be delivered. Please try again.",
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                    service_name="smtp",
                    details={"email_kind": kind},
                )
            )

        self._logger.info("email_sent", email_kind=kind, recipient=to_email)
        return Success(value=None)
