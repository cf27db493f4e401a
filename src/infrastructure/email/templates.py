"""HTML bodies for outgoing email.

User-supplied values (names, event titles) are HTML-escaped before they are
interpolated.
"""

from html import escape

BRAND_COLOR = "#21808d"
QR_CONTENT_ID = "registration-qr"


def otp_subject() -> str:
    return "Verify Your Email - OTP"


def otp_html(name: str, otp_code: str, expires_in_minutes: int) -> str:
    return f"""\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: {BRAND_COLOR};">Email Verification</h2>
  <p>Hi {escape(name)},</p>
  <p>Thank you for registering with College Event Manager!</p>
  <p>Your OTP for email verification is:</p>
  <div style="background-color: #f5f5f5; padding: 20px; text-align: center; font-size: 32px; font-weight: bold; letter-spacing: 5px; color: {BRAND_COLOR}; margin: 20px 0;">
    {escape(otp_code)}
  </div>
  <p>This OTP will expire in {expires_in_minutes} minutes.</p>
  <p>If you didn't request this, please ignore this email.</p>
  <p>Best regards,<br>College Event Manager Team</p>
</div>
"""


def otp_text(name: str, otp_code: str, expires_in_minutes: int) -> str:
    return (
        f"Hi {name},\n\n"
        f"Your OTP for email verification is {otp_code}.\n"
        f"It expires in {expires_in_minutes} minutes.\n"
    )


def confirmation_subject(event_title: str) -> str:
    return f"Registration Confirmed - {event_title}"


def confirmation_html(
    name: str,
    event_title: str,
    event_date: str,
    event_time: str,
    event_venue: str,
) -> str:
    """Confirmation body; the QR image is referenced by Content-ID."""
    return f"""\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: {BRAND_COLOR};">Event Registration Successful!</h2>
  <p>Hi {escape(name)},</p>
  <p>Congratulations! You have successfully registered for <strong>{escape(event_title)}</strong>.</p>
  <p>{escape(event_date)} &middot; {escape(event_time)} &middot; {escape(event_venue)}</p>
  <p>Please save this QR code for RSVP at the venue:</p>
  <div style="text-align: center; margin: 30px 0;">
    <img src="cid:{QR_CONTENT_ID}" alt="Event QR Code" style="max-width: 250px; border: 2px solid {BRAND_COLOR}; padding: 10px;">
  </div>
  <p>Show this QR code at the event venue for entry.</p>
  <p>We look forward to seeing you at the event!</p>
  <p>Best regards,<br>College Event Manager Team</p>
</div>
"""


def confirmation_text(
    name: str,
    event_title: str,
    event_date: str,
    event_time: str,
    event_venue: str,
) -> str:
    return (
        f"Hi {name},\n\n"
        f"You are registered for {event_title} on {event_date} ({event_time}) "
        f"at {event_venue}.\n"
        "Show the attached QR code at the venue for entry.\n"
    )
