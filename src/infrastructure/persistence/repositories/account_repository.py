"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture. Maps between domain Account entities and
AccountModel rows plus the ``account_event_roster`` table.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import AccountRole
from src.domain.value_objects.one_time_password import OneTimePassword
from src.infrastructure.persistence.models import AccountModel, account_event_roster
from src.infrastructure.persistence.repositories._errors import map_integrity_error


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Attributes:
        session: SQLAlchemy async session shared with the unit of work.

    Example:
        >>> repo = AccountRepository(session)
        >>> account = await repo.find_by_email("student@college.edu")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        rosters = await self._load_rosters([model.id])
        return self._to_domain(model, rosters[model.id])

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address.

        Emails are stored lowercase, so the lookup lowercases its input.
        """
        stmt = select(AccountModel).where(
            func.lower(AccountModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        rosters = await self._load_rosters([model.id])
        return self._to_domain(model, rosters[model.id])

    async def find_by_ids(self, account_ids: list[UUID]) -> list[Account]:
        """Fetch several accounts at once; unknown ids are skipped."""
        if not account_ids:
            return []
        stmt = select(AccountModel).where(AccountModel.id.in_(account_ids))
        result = await self.session.execute(stmt)
        models = list(result.scalars().all())
        rosters = await self._load_rosters([m.id for m in models])
        return [self._to_domain(m, rosters[m.id]) for m in models]

    async def add(self, account: Account) -> Result[None, DomainError]:
        """Insert a new account.

        Returns:
            Success(None), or Failure(ConflictError) when the email is taken.
        """
        self.session.add(self._to_model(account))
        try:
            await self.session.flush()
        except IntegrityError as e:
            return Failure(
                error=map_integrity_error(
                    e,
                    conflict=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message="An account with this email already exists",
                        resource_type="Account",
                        conflicting_field="email",
                    ),
                )
            )
        return Success(value=None)

    async def update(self, account: Account) -> None:
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.name = account.name
        model.email = account.email
        model.password_hash = account.password_hash
        model.role = account.role.value
        model.is_verified = account.is_verified
        model.otp_code = account.pending_otp.code if account.pending_otp else None
        model.otp_expires_at = (
            account.pending_otp.expires_at if account.pending_otp else None
        )
        model.updated_at = account.updated_at

        await self.session.flush()

    async def add_registered_event(self, account_id: UUID, event_id: UUID) -> None:
        await self.session.execute(
            insert(account_event_roster).values(
                account_id=account_id, event_id=event_id
            )
        )

    async def remove_registered_event(
        self, account_id: UUID, event_id: UUID
    ) -> bool:
        result = await self.session.execute(
            delete(account_event_roster).where(
                account_event_roster.c.account_id == account_id,
                account_event_roster.c.event_id == event_id,
            )
        )
        return bool(result.rowcount)

    async def remove_event_from_all(self, event_id: UUID) -> int:
        result = await self.session.execute(
            delete(account_event_roster).where(
                account_event_roster.c.event_id == event_id
            )
        )
        return int(result.rowcount or 0)

    async def _load_rosters(
        self, account_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        rosters: dict[UUID, list[UUID]] = defaultdict(list)
        if not account_ids:
            return rosters
        stmt = (
            select(account_event_roster.c.account_id, account_event_roster.c.event_id)
            .where(account_event_roster.c.account_id.in_(account_ids))
            .order_by(account_event_roster.c.added_at)
        )
        result = await self.session.execute(stmt)
        for account_id, event_id in result.all():
            rosters[account_id].append(event_id)
        return rosters

    def _to_domain(self, model: AccountModel, roster: list[UUID]) -> Account:
        """Convert database model (plus roster rows) to domain entity."""
        pending_otp = None
        if model.otp_code is not None and model.otp_expires_at is not None:
            pending_otp = OneTimePassword(
                code=model.otp_code, expires_at=model.otp_expires_at
            )

        return Account(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=AccountRole(model.role),
            is_verified=model.is_verified,
            pending_otp=pending_otp,
            registered_event_ids=list(roster),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            role=account.role.value,
            is_verified=account.is_verified,
            otp_code=account.pending_otp.code if account.pending_otp else None,
            otp_expires_at=(
                account.pending_otp.expires_at if account.pending_otp else None
            ),
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
