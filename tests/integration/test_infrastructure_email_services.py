"""Integration tests for the email adapters.

Architecture:
- SmtpEmailService builds real MIME messages; only ``aiosmtplib.send`` is
  patched, so the message handed to the relay is inspected as sent
- StubEmailService records what would have been sent
"""

import base64
from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.email.smtp_email_service import SmtpEmailService
from src.infrastructure.email.stub_email_service import StubEmailService
from src.infrastructure.email.templates import QR_CONTENT_ID
from src.infrastructure.errors import ExternalServiceError

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"
QR_DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def smtp_service(mock_logger):
    return SmtpEmailService(
        host="smtp.college.edu",
        port=587,
        username="events@college.edu",
        password="app-password",
        from_address="events@college.edu",
        from_name="College Event Manager",
        logger=mock_logger,
    )


def _confirmation_kwargs(**overrides):
    data = {
        "to_email": "asha@college.edu",
        "name": "Asha <Rao>",
        "event_title": "Tech Fest",
        "event_date": "Monday, March 15, 2027",
        "event_time": "9:00 AM - 5:00 PM",
        "event_venue": "Main Auditorium",
        "qr_code_data_url": QR_DATA_URL,
    }
    data.update(overrides)
    return data


@pytest.mark.integration
class TestSmtpEmailService:
    async def test_otp_email_is_sent_through_relay(self, smtp_service, mock_logger):
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            result = await smtp_service.send_otp_email(
                "asha@college.edu", "Asha", "042917", 10
            )

        assert result == Success(value=None)
        message = send.call_args.args[0]
        assert message["To"] == "asha@college.edu"
        assert message["Subject"] == "Verify Your Email - OTP"
        assert "College Event Manager" in message["From"]
        kwargs = send.call_args.kwargs
        assert kwargs["hostname"] == "smtp.college.edu"
        assert kwargs["port"] == 587
        assert kwargs["start_tls"] is True
        text_part, html_part = message.get_payload()
        assert "042917" in text_part.get_payload(decode=True).decode()
        assert "042917" in html_part.get_payload(decode=True).decode()
        mock_logger.info.assert_called_once_with(
            "email_sent", email_kind="otp", recipient="asha@college.edu"
        )

    async def test_confirmation_carries_inline_qr_image(self, smtp_service):
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            await smtp_service.send_registration_confirmation(**_confirmation_kwargs())

        message = send.call_args.args[0]
        assert message.get_content_subtype() == "related"
        assert message["Subject"] == "Registration Confirmed - Tech Fest"
        body, image = message.get_payload()
        assert image.get_content_type() == "image/png"
        assert image["Content-ID"] == f"<{QR_CONTENT_ID}>"
        assert image.get_payload(decode=True) == PNG_BYTES
        html = body.get_payload()[1].get_payload(decode=True).decode()
        assert f"cid:{QR_CONTENT_ID}" in html
        assert "Asha &lt;Rao&gt;" in html

    async def test_confirmation_without_data_url_skips_image(self, smtp_service):
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            await smtp_service.send_registration_confirmation(
                **_confirmation_kwargs(qr_code_data_url="https://cdn.example/qr.png")
            )

        assert len(send.call_args.args[0].get_payload()) == 1

    @pytest.mark.parametrize(
        "error",
        [
            aiosmtplib.SMTPConnectError("relay down"),
            ConnectionRefusedError("refused"),
        ],
    )
    async def test_delivery_failure_maps_to_external_service_error(
        self, smtp_service, mock_logger, error
    ):
        with patch("aiosmtplib.send", new_callable=AsyncMock, side_effect=error):
            result = await smtp_service.send_otp_email(
                "asha@college.edu", "Asha", "042917", 10
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ExternalServiceError)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED
        assert result.error.service_name == "smtp"
        assert mock_logger.error.call_args.args[0] == "email_send_failed"


@pytest.mark.integration
class TestStubEmailService:
    async def test_records_messages(self, mock_logger):
        service = StubEmailService(mock_logger)

        await service.send_otp_email("asha@college.edu", "Asha", "042917", 10)
        await service.send_registration_confirmation(**_confirmation_kwargs())

        assert service.sent == [
            ("otp", "asha@college.edu", {"name": "Asha", "otp_code": "042917"}),
            (
                "confirmation",
                "asha@college.edu",
                {"name": "Asha <Rao>", "event_title": "Tech Fest"},
            ),
        ]

    async def test_otp_code_only_logged_when_exposed(self, mock_logger):
        await StubEmailService(mock_logger).send_otp_email("a@b.edu", "A", "111111", 10)
        assert "otp_code" not in mock_logger.info.call_args.kwargs

        await StubEmailService(mock_logger, expose_codes=True).send_otp_email(
            "a@b.edu", "A", "222222", 10
        )
        assert mock_logger.info.call_args.kwargs["otp_code"] == "222222"
