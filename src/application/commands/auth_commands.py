"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
- Inputs arriving over HTTP are already validated by the Annotated types
  in ``src.domain.types``
"""

from dataclasses import dataclass

from src.domain.enums import AccountRole


@dataclass(frozen=True, kw_only=True)
class RegisterAccount:
    """Create an unverified account and email it a one-time password.

    Attributes:
        name: Display name.
        email: Normalized email address.
        password: Plaintext password (hashed by the handler).
        role: STUDENT or ADMIN.

    Example:
        >>> command = RegisterAccount(
        ...     name="Asha Rao",
        ...     email="asha@college.edu",
        ...     password="campus123",
        ...     role=AccountRole.STUDENT,
        ... )
        >>> result = await handler.handle(command)
    """

    name: str
    email: str
    password: str
    role: AccountRole = AccountRole.STUDENT


@dataclass(frozen=True, kw_only=True)
class VerifyOtp:
    """Confirm control of an email address and open a session.

    Attributes:
        email: Account email.
        otp: Submitted 6-digit code.
    """

    email: str
    otp: str


@dataclass(frozen=True, kw_only=True)
class ResendOtp:
    """Replace the pending OTP of an unverified account and email it."""

    email: str


@dataclass(frozen=True, kw_only=True)
class Login:
    """Check credentials of a verified account and open a session."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class Logout:
    """End a session.

    Attributes:
        session_id: Opaque id from the session cookie. Logging out of an
            unknown or expired session still succeeds.
    """

    session_id: str
