"""Validators package exports."""

from src.domain.validators.functions import (
    MIN_PASSWORD_LENGTH,
    OTP_LENGTH,
    validate_email,
    validate_not_blank,
    validate_otp_code,
    validate_password,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "OTP_LENGTH",
    "validate_email",
    "validate_not_blank",
    "validate_otp_code",
    "validate_password",
]
