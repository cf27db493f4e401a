"""Registration database model.

The unique constraint on (account_id, event_id) is what makes duplicate
registrations impossible, including under concurrent requests.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel

REGISTRATION_UNIQUE_CONSTRAINT = "uq_registrations_account_event"


class RegistrationModel(BaseMutableModel):
    """Registration ledger entry.

    Fields:
        account_id: Registered account
        event_id: Event registered for
        qr_code: PNG data URL of the confirmation token
        registered_at: When the registration was made
        attended / attended_at: Check-in state

    Constraints:
        - uq_registrations_account_event: one registration per pair
    """

    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint(
            "account_id", "event_id", name=REGISTRATION_UNIQUE_CONSTRAINT
        ),
    )

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    qr_code: Mapped[str] = mapped_column(Text, nullable=False)
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    attended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    attended_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
