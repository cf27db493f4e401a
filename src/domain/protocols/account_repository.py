"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture. Implementations only flush;
committing is the unit of work's job.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by email (case-insensitive)
        find_by_ids: Retrieve several accounts (organisers, attendees)
        add: Insert a new account, reporting duplicate emails as a conflict
        update: Persist changed scalar fields (verification, OTP, profile)
        add_registered_event: Add an event to the account's roster
        remove_registered_event: Remove an event from the account's roster
        remove_event_from_all: Remove an event from every account's roster
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (case-insensitive)."""
        ...

    async def find_by_ids(self, account_ids: list[UUID]) -> list[Account]:
        """Find several accounts by ID. Unknown ids are skipped."""
        ...

    async def add(self, account: Account) -> Result[None, DomainError]:
        """Insert a new account.

        Returns:
            Success(None), or Failure(ConflictError) if the email is taken.
        """
        ...

    async def update(self, account: Account) -> None:
        """Persist name, role, verification state and pending OTP."""
        ...

    async def add_registered_event(self, account_id: UUID, event_id: UUID) -> None:
        ...

    async def remove_registered_event(
        self, account_id: UUID, event_id: UUID
    ) -> bool:
        """Remove one roster entry.

        Returns:
            True if an entry was removed, False if there was none.
        """
        ...

    async def remove_event_from_all(self, event_id: UUID) -> int:
        """Remove an event from every account roster.

        Returns:
            Number of roster entries removed.
        """
        ...
