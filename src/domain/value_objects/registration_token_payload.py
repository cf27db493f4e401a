"""Registration token payload.

The payload is what a confirmation QR code encodes. It is self-describing so
that a scanner can show who the attendee is and which event the code belongs
to without a database lookup, and so that check-in can locate the
registration by id.
"""

import json
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistrationTokenPayload:
    """Data encoded in a registration QR code.

    Attributes:
        registration_id: Id of the registration (generated before persistence).
        account_id: Registrant's account id.
        account_name: Registrant's name.
        account_email: Registrant's email.
        event_id: Event id.
        event_title: Event title.
        event_date: Event date.
        event_time: Event display time.
        event_venue: Event venue.
        issued_at: When the registration was made.
    """

    registration_id: UUID
    account_id: UUID
    account_name: str
    account_email: str
    event_id: UUID
    event_title: str
    event_date: date
    event_time: str
    event_venue: str
    issued_at: datetime

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("registration_id", "account_id", "event_id"):
            data[key] = str(data[key])
        data["event_date"] = self.event_date.isoformat()
        data["issued_at"] = self.issued_at.isoformat()
        return data

    def to_json(self) -> str:
        """Serialize to compact JSON (the text placed in the QR code)."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "RegistrationTokenPayload":
        """Parse scanned QR text back into a payload.

        Raises:
            ValueError: If the text is not a well-formed payload.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Token is not valid JSON: {e.msg}") from e
        if not isinstance(data, dict):
            raise ValueError("Token must be a JSON object")
        try:
            return cls(
                registration_id=UUID(data["registration_id"]),
                account_id=UUID(data["account_id"]),
                account_name=str(data["account_name"]),
                account_email=str(data["account_email"]),
                event_id=UUID(data["event_id"]),
                event_title=str(data["event_title"]),
                event_date=date.fromisoformat(data["event_date"]),
                event_time=str(data["event_time"]),
                event_venue=str(data["event_venue"]),
                issued_at=datetime.fromisoformat(data["issued_at"]),
            )
        except KeyError as e:
            raise ValueError(f"Token is missing field {e.args[0]}") from e
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Token has a malformed field: {e}") from e
