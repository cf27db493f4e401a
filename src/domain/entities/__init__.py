"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account
from src.domain.entities.event import Event
from src.domain.entities.registration import Registration

__all__ = [
    "Account",
    "Event",
    "Registration",
]
