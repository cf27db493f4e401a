"""Database models for persistence layer.

SQLAlchemy models that map to database tables. Infrastructure concern only;
domain entities live in src/domain/entities/ and are mapped by repositories.

Models Organization:
    - account.py: AccountModel
    - event.py: EventModel
    - registration.py: RegistrationModel (unique per account/event)
    - rosters.py: event_attendees and account_event_roster tables
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.models.event import EventModel
from src.infrastructure.persistence.models.registration import (
    REGISTRATION_UNIQUE_CONSTRAINT,
    RegistrationModel,
)
from src.infrastructure.persistence.models.rosters import (
    account_event_roster,
    event_attendees,
)

__all__ = [
    "BaseModel",
    "AccountModel",
    "EventModel",
    "RegistrationModel",
    "REGISTRATION_UNIQUE_CONSTRAINT",
    "account_event_roster",
    "event_attendees",
]
