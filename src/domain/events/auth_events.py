"""Account and authentication domain events.

Pattern (3-state):
    - *Attempted: published before the operation runs
    - *Succeeded: published after the change is committed
    - *Failed: published when the operation returns a Failure
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountRegistrationAttempted(DomainEvent):
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountRegistrationSucceeded(DomainEvent):
    account_id: UUID
    email: str
    role: str


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountRegistrationFailed(DomainEvent):
    email: str
    reason: str


@dataclass(frozen=True, kw_only=True, slots=True)
class OtpIssued(DomainEvent):
    """A verification code was (re)issued. The code itself is never carried."""

    account_id: UUID
    email: str
    delivered: bool


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountVerificationSucceeded(DomainEvent):
    account_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountVerificationFailed(DomainEvent):
    email: str
    reason: str


@dataclass(frozen=True, kw_only=True, slots=True)
class LoginSucceeded(DomainEvent):
    account_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class LoginFailed(DomainEvent):
    email: str
    reason: str


@dataclass(frozen=True, kw_only=True, slots=True)
class LoggedOut(DomainEvent):
    account_id: UUID | None
