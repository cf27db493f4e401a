"""SQLAlchemy repository implementations."""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from src.infrastructure.persistence.repositories.registration_repository import (
    RegistrationRepository,
)

__all__ = [
    "AccountRepository",
    "EventRepository",
    "RegistrationRepository",
]
