"""Account database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - otp_code / otp_expires_at: pending email verification code, cleared
      on verification
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model for authentication and roster tracking.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        name: Display name
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        role: "student" or "admin"
        is_verified: Email verification status (blocks login if False)
        otp_code: Pending verification code (nullable)
        otp_expires_at: Expiry of the pending code (nullable)

    Indexes:
        - ix_accounts_email (unique): login and registration lookups
    """

    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Account email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="student",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    otp_code: Mapped[str | None] = mapped_column(String(6), nullable=True)

    otp_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
