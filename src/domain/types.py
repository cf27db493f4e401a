"""Annotated types with centralized validation.

Define validation once, use everywhere. All custom types use Pydantic's
Annotated with Field constraints and AfterValidator, so request schemas and
commands share the same rules.

Usage:
    from src.domain.types import Email, Password

    class RegisterRequest(BaseModel):
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_not_blank,
    validate_otp_code,
    validate_password,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=3,
        max_length=255,
        description="Email address",
        examples=["student@college.edu"],
    ),
    AfterValidator(validate_email),
]
"""Email address, validated and normalized to lowercase.

Examples:
    >>> from pydantic import BaseModel
    >>> class LoginRequest(BaseModel):
    ...     email: Email
    >>> LoginRequest(email="Student@College.EDU").email
    'student@college.edu'
"""

Password = Annotated[
    str,
    Field(
        min_length=1,
        max_length=128,
        description="Password, at least 6 characters",
        examples=["campus123"],
    ),
    AfterValidator(validate_password),
]
"""Plaintext password as submitted; hashed before it is stored."""

OtpCode = Annotated[
    str,
    Field(
        min_length=6,
        max_length=16,
        description="6-digit one-time password",
        examples=["042917"],
    ),
    AfterValidator(validate_otp_code),
]
"""Six-digit verification code. Leading zeros are significant."""

DisplayName = Annotated[
    str,
    Field(min_length=1, max_length=100, description="Display name"),
    AfterValidator(validate_not_blank),
]

# ============================================================================
# Event Types
# ============================================================================

EventTitle = Annotated[
    str,
    Field(min_length=1, max_length=200, description="Event title"),
    AfterValidator(validate_not_blank),
]

EventText = Annotated[
    str,
    Field(min_length=1, max_length=10_000),
    AfterValidator(validate_not_blank),
]
"""Required free text (description, time slot, venue, image URL)."""

Capacity = Annotated[
    int,
    Field(gt=0, le=100_000, description="Maximum number of registrations"),
]
