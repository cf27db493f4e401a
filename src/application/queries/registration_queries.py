"""Registration ledger queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import AuthContext


@dataclass(frozen=True, kw_only=True)
class ListMyRegistrations:
    """List the caller's registrations, newest first, each with its event."""

    auth: AuthContext


@dataclass(frozen=True, kw_only=True)
class GetRegistration:
    """Get one of the caller's registrations.

    Attributes:
        auth: Caller; must own the registration.
        registration_id: Registration to fetch.
    """

    auth: AuthContext
    registration_id: UUID


@dataclass(frozen=True, kw_only=True)
class CheckRegistration:
    """Whether the caller is registered for an event."""

    auth: AuthContext
    event_id: UUID
