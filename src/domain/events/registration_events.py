"""Registration ledger and event catalog domain events."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationAttempted(DomainEvent):
    account_id: UUID
    event_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationCreated(DomainEvent):
    registration_id: UUID
    account_id: UUID
    event_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationFailed(DomainEvent):
    account_id: UUID
    event_id: UUID
    reason: str


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationCancelled(DomainEvent):
    """A registration was removed.

    Attributes:
        retraction_failures: Names of roster retractions that could not be
            applied and were skipped.
    """

    registration_id: UUID
    account_id: UUID
    event_id: UUID
    retraction_failures: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True, slots=True)
class AttendeeCheckedIn(DomainEvent):
    registration_id: UUID
    event_id: UUID
    checked_in_by: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class EventCreated(DomainEvent):
    event_id: UUID
    organiser_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class EventUpdated(DomainEvent):
    event_id: UUID
    organiser_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class EventDeleted(DomainEvent):
    event_id: UUID
    organiser_id: UUID
    registrations_removed: int
