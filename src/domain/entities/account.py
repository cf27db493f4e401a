"""Account domain entity.

Pure business logic, no framework dependencies.

Verification lifecycle:
    Unverified(pending OTP) -> Verified (terminal)

    - A new account is unverified and carries a freshly issued OTP
    - Resending replaces the pending OTP wholesale
    - Verification clears the OTP and can only happen once
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import AccountRole
from src.domain.value_objects.one_time_password import OneTimePassword


@dataclass
class Account:
    """Account domain entity.

    Business Rules:
        - Email is unique and stored lowercase
        - Login requires a verified email
        - is_verified never goes back to False

    Attributes:
        id: Unique account identifier (UUIDv7).
        name: Display name.
        email: Normalized email address.
        password_hash: Bcrypt hash (never plaintext).
        role: STUDENT or ADMIN.
        is_verified: Whether the email address has been confirmed.
        pending_otp: Outstanding verification code, None once verified.
        registered_event_ids: Events this account holds a registration for.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    role: AccountRole
    is_verified: bool
    created_at: datetime
    updated_at: datetime
    pending_otp: OneTimePassword | None = None
    registered_event_ids: list[UUID] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN

    def replace_otp(self, otp: OneTimePassword) -> None:
        """Install a new pending OTP, discarding any previous one."""
        self.pending_otp = otp
        self.updated_at = datetime.now(UTC)

    def mark_verified(self) -> None:
        """Flip the account to verified and clear the pending OTP.

        Both fields change together so a verified account never keeps a
        usable code.
        """
        self.is_verified = True
        self.pending_otp = None
        self.updated_at = datetime.now(UTC)
