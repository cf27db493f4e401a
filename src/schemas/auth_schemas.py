"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register    - Create account, email OTP
    POST /api/v1/auth/verify-otp  - Verify email, open session
    POST /api/v1/auth/resend-otp  - Replace and resend OTP
    POST /api/v1/auth/login       - Open session
    POST /api/v1/auth/logout      - Close session
    GET  /api/v1/auth/me          - Current session identity
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import AccountRole
from src.domain.types import DisplayName, Email, OtpCode, Password
from src.domain.value_objects import AuthContext


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for account registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    name: DisplayName
    email: Email
    password: Password
    role: AccountRole = Field(
        default=AccountRole.STUDENT,
        description="Account role (student or admin)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Asha Rao",
                "email": "asha@college.edu",
                "password": "campus123",
                "role": "student",
            }
        }
    )


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created).

    The account must be verified with the emailed OTP before login.
    """

    user_id: UUID = Field(..., description="Created account's ID")
    email: str = Field(..., description="Email the OTP was sent to")
    message: str = Field(
        default="Registration successful. Please verify your email with the OTP sent.",
        description="Success message",
    )


# =============================================================================
# OTP
# =============================================================================


class VerifyOtpRequest(BaseModel):
    """POST /api/v1/auth/verify-otp"""

    email: Email
    otp: OtpCode


class ResendOtpRequest(BaseModel):
    """POST /api/v1/auth/resend-otp"""

    email: Email


# =============================================================================
# Login / session
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    Only the email is format-checked; any password length is accepted so a
    wrong password gets the same 401 as an unknown account.
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Identity of the signed-in account."""

    id: UUID
    name: str
    email: str
    role: AccountRole

    @classmethod
    def from_context(cls, context: AuthContext) -> "UserResponse":
        return cls(
            id=context.account_id,
            name=context.name,
            email=context.email,
            role=context.role,
        )


class SessionResponse(BaseModel):
    """Response for verify-otp and login (session cookie set)."""

    message: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    """Response for GET /auth/me."""

    user: UserResponse
