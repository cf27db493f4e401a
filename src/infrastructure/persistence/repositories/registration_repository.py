"""RegistrationRepository - SQLAlchemy implementation.

The unique constraint ``uq_registrations_account_event`` is the final
arbiter for duplicates: ``add`` turns its violation into a ConflictError so
that a lost race surfaces as DuplicateRegistration rather than a 500.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.infrastructure.persistence.models import RegistrationModel
from src.infrastructure.persistence.repositories._errors import map_integrity_error


class RegistrationRepository:
    """SQLAlchemy implementation of RegistrationRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_by_account_and_event(
        self, account_id: UUID, event_id: UUID
    ) -> Registration | None:
        stmt = select(RegistrationModel).where(
            RegistrationModel.account_id == account_id,
            RegistrationModel.event_id == event_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_account(self, account_id: UUID) -> list[Registration]:
        stmt = (
            select(RegistrationModel)
            .where(RegistrationModel.account_id == account_id)
            .order_by(RegistrationModel.registered_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def add(self, registration: Registration) -> Result[None, DomainError]:
        """Insert a registration.

        Returns:
            Success(None), or Failure(ConflictError) if the account already
            holds a registration for the event.
        """
        self.session.add(self._to_model(registration))
        try:
            await self.session.flush()
        except IntegrityError as e:
            return Failure(
                error=map_integrity_error(
                    e,
                    conflict=ConflictError(
                        code=ErrorCode.REGISTRATION_ALREADY_EXISTS,
                        message="You are already registered for this event",
                        resource_type="Registration",
                        conflicting_field="event_id",
                    ),
                )
            )
        return Success(value=None)

    async def update(self, registration: Registration) -> None:
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.attended = registration.attended
        model.attended_at = registration.attended_at

        await self.session.flush()

    async def delete(self, registration_id: UUID) -> bool:
        result = await self.session.execute(
            delete(RegistrationModel).where(RegistrationModel.id == registration_id)
        )
        return bool(result.rowcount)

    async def delete_by_event(self, event_id: UUID) -> int:
        result = await self.session.execute(
            delete(RegistrationModel).where(RegistrationModel.event_id == event_id)
        )
        return int(result.rowcount or 0)

    def _to_domain(self, model: RegistrationModel) -> Registration:
        return Registration(
            id=model.id,
            account_id=model.account_id,
            event_id=model.event_id,
            qr_code=model.qr_code,
            registered_at=model.registered_at,
            attended=model.attended,
            attended_at=model.attended_at,
        )

    def _to_model(self, registration: Registration) -> RegistrationModel:
        return RegistrationModel(
            id=registration.id,
            account_id=registration.account_id,
            event_id=registration.event_id,
            qr_code=registration.qr_code,
            registered_at=registration.registered_at,
            attended=registration.attended,
            attended_at=registration.attended_at,
        )
