"""SQLAlchemy unit of work.

Wraps the request-scoped AsyncSession shared by all repositories of one
command. Repositories flush; this class commits or rolls back.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError

T = TypeVar("T")


class SqlAlchemyUnitOfWork:
    """Transaction boundary over one AsyncSession.

    Example:
        >>> uow = SqlAlchemyUnitOfWork(session)
        >>> await registration_repo.add(registration)
        >>> await event_repo.add_attendee(event.id, account.id)
        >>> await uow.commit()  # both writes become durable together
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def run_isolated(
        self,
        operation: Callable[[], Awaitable[T]],
    ) -> Result[T, DomainError]:
        """Run ``operation`` inside a SAVEPOINT.

        A database failure rolls back only the savepoint, so the enclosing
        transaction stays usable and can still be committed.

        Returns:
            Success(operation result), or Failure(DatabaseError) if the
            operation raised a SQLAlchemy error.
        """
        try:
            async with self.session.begin_nested():
                value = await operation()
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(
                    code=ErrorCode.DATABASE_ERROR,
                    message="Database operation failed",
                    infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
                    details={"error_type": type(e).__name__},
                )
            )
        return Success(value=value)
