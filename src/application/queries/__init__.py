"""Queries (CQRS read side)."""

from src.application.queries.event_queries import GetEvent, IsEventOrganiser, ListEvents
from src.application.queries.registration_queries import (
    CheckRegistration,
    GetRegistration,
    ListMyRegistrations,
)

__all__ = [
    "CheckRegistration",
    "GetEvent",
    "GetRegistration",
    "IsEventOrganiser",
    "ListEvents",
    "ListMyRegistrations",
]
