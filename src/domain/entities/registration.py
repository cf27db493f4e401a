"""Registration domain entity.

A registration is the ledger entry binding one account to one event. At most
one registration exists per (account, event) pair.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Registration:
    """Registration domain entity.

    Attributes:
        id: Unique registration identifier (UUIDv7). Generated before the
            row is written because it is embedded in the QR token.
        account_id: Registered account.
        event_id: Event registered for.
        qr_code: PNG data URL of the confirmation token.
        registered_at: When the registration was made.
        attended: Whether the attendee has been checked in.
        attended_at: Check-in timestamp.
    """

    id: UUID
    account_id: UUID
    event_id: UUID
    qr_code: str
    registered_at: datetime
    attended: bool = False
    attended_at: datetime | None = None

    def is_owned_by(self, account_id: UUID) -> bool:
        return self.account_id == account_id

    def mark_attended(self, at: datetime | None = None) -> None:
        self.attended = True
        self.attended_at = at or datetime.now(UTC)
