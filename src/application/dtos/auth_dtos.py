"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from authentication handlers back to the
presentation layer.

DTOs:
    - RegisteredAccount: Result from RegisterAccount command
    - AuthenticatedSession: Result from VerifyOtp and Login commands
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import AuthContext


@dataclass(frozen=True, kw_only=True)
class RegisteredAccount:
    """Response from successful registration.

    Attributes:
        account_id: New account's id.
        email: Normalized email the OTP was sent to.
    """

    account_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class AuthenticatedSession:
    """Response from a command that opened a session.

    Attributes:
        context: Identity stored in the session.
        session_id: Opaque id to place in the session cookie.
    """

    context: AuthContext
    session_id: str
