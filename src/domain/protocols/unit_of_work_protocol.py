"""Unit of work protocol.

Repositories share one database session and only flush. The unit of work
decides when the combined changes become durable, so a multi-repository
operation (registration row plus both rosters) commits or rolls back as one.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

from src.core.errors import DomainError
from src.core.result import Result

T = TypeVar("T")


class UnitOfWorkProtocol(Protocol):
    """Transaction boundary for a single command."""

    async def commit(self) -> None:
        """Make all pending changes durable."""
        ...

    async def rollback(self) -> None:
        """Discard all pending changes."""
        ...

    async def run_isolated(
        self,
        operation: Callable[[], Awaitable[T]],
    ) -> Result[T, DomainError]:
        """Run one step so that its failure does not poison the transaction.

        Used where a command must log a failed step and carry on with the
        remaining ones (registration cancellation).
        """
        ...
