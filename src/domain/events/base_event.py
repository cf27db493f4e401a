"""Base domain event class.

Domain events represent things that happened in the business domain and are
named in past tense (AccountRegistered, RegistrationCreated). ``*Attempted``
events are published before an operation, ``*Succeeded``/``*Failed`` after.

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class AccountVerified(DomainEvent):
    ...     account_id: UUID
    >>>
    >>> event = AccountVerified(account_id=account.id)
    >>> event.id           # auto-generated
    >>> event.occurred_at  # auto-generated (UTC)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC).
    """

    id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
