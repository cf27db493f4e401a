"""RegistrationRepository protocol for the registration ledger.

Port (interface) for hexagonal architecture. The backing store MUST enforce
uniqueness of (account_id, event_id); ``add`` reports a violation as a
``ConflictError`` instead of raising.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.registration import Registration


class RegistrationRepository(Protocol):
    """Registration repository protocol (port).

    Methods:
        find_by_id: Retrieve registration by ID
        find_by_account_and_event: Retrieve the registration for a pair
        list_by_account: An account's registrations, newest first
        add: Insert a registration (unique per account/event)
        update: Persist attendance changes
        delete: Delete one registration
        delete_by_event: Delete every registration of an event
    """

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        ...

    async def find_by_account_and_event(
        self, account_id: UUID, event_id: UUID
    ) -> Registration | None:
        ...

    async def list_by_account(self, account_id: UUID) -> list[Registration]:
        """List an account's registrations, most recent first."""
        ...

    async def add(self, registration: Registration) -> Result[None, DomainError]:
        """Insert a registration.

        Returns:
            Success(None), or Failure(ConflictError) when the account already
            holds a registration for the event.
        """
        ...

    async def update(self, registration: Registration) -> None:
        ...

    async def delete(self, registration_id: UUID) -> bool:
        """Delete a registration.

        Returns:
            True if a row was deleted.
        """
        ...

    async def delete_by_event(self, event_id: UUID) -> int:
        """Delete all registrations for an event.

        Returns:
            Number of rows deleted.
        """
        ...
