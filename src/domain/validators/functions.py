"""Centralized validation functions.

Validation logic is defined once and reused everywhere via the Annotated
types in ``src.domain.types``. Validators are pure functions that raise
ValueError on validation failure.
"""

from email_validator import EmailNotValidError
from email_validator import validate_email as _check_email

MIN_PASSWORD_LENGTH = 6
OTP_LENGTH = 6


def validate_email(v: str) -> str:
    """Validate email format and normalize to lowercase.

    Uses email-validator, the same library as the Email value object, so
    request validation and domain validation agree.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("Student@College.EDU")
        'student@college.edu'
    """
    try:
        result = _check_email(v.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email format: {v}") from e
    return result.normalized.lower()


def validate_password(v: str) -> str:
    """Validate password length.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If the password is shorter than six characters.
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return v


def validate_otp_code(v: str) -> str:
    """Validate a submitted one-time password.

    Surrounding whitespace is stripped; the remainder must be exactly six
    ASCII digits.

    Raises:
        ValueError: If the code is not six digits.
    """
    code = v.strip()
    if len(code) != OTP_LENGTH or not (code.isascii() and code.isdigit()):
        raise ValueError(f"OTP must be {OTP_LENGTH} digits")
    return code


def validate_not_blank(v: str) -> str:
    """Strip whitespace and reject empty strings."""
    stripped = v.strip()
    if not stripped:
        raise ValueError("Value cannot be blank")
    return stripped
