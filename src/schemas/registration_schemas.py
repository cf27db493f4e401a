"""Registration ledger request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import CheckInResult, RegistrationView
from src.domain.entities import Registration
from src.schemas.event_schemas import EventSummaryResponse


class RegistrationCreateRequest(BaseModel):
    """POST /api/v1/registrations"""

    event_id: UUID = Field(..., description="Event to register for")


class RegistrationResponse(BaseModel):
    """A registration, optionally with its event.

    ``qr_code`` is a ``data:image/png;base64,...`` URL that can be used
    directly as an image source.
    """

    id: UUID
    account_id: UUID
    event_id: UUID
    qr_code: str
    registered_at: datetime
    attended: bool
    attended_at: datetime | None = None
    event: EventSummaryResponse | None = None

    @classmethod
    def from_entity(
        cls, registration: Registration, event: EventSummaryResponse | None = None
    ) -> "RegistrationResponse":
        return cls(
            id=registration.id,
            account_id=registration.account_id,
            event_id=registration.event_id,
            qr_code=registration.qr_code,
            registered_at=registration.registered_at,
            attended=registration.attended,
            attended_at=registration.attended_at,
            event=event,
        )

    @classmethod
    def from_view(cls, view: RegistrationView) -> "RegistrationResponse":
        event = EventSummaryResponse.from_entity(view.event) if view.event else None
        return cls.from_entity(view.registration, event)


class RegistrationCreateResponse(BaseModel):
    message: str = "Successfully registered for event"
    registration: RegistrationResponse


class RegistrationStatusResponse(BaseModel):
    """GET /api/v1/registrations/check/{event_id}"""

    is_registered: bool
    registration: RegistrationResponse | None = None


class CheckInRequest(BaseModel):
    """Scanned QR payload.

    POST /api/v1/registrations/check-ins
    """

    payload: str = Field(
        ..., min_length=2, max_length=4096, description="Text decoded from the QR code"
    )
    event_id: UUID | None = Field(
        default=None,
        description="Event being checked into; tokens for other events are rejected",
    )


class CheckInResponse(BaseModel):
    message: str = "Attendee checked in"
    registration_id: UUID
    attendee_name: str
    event_title: str
    attended_at: datetime | None

    @classmethod
    def from_dto(cls, dto: CheckInResult) -> "CheckInResponse":
        return cls(
            registration_id=dto.registration.id,
            attendee_name=dto.attendee_name,
            event_title=dto.event_title,
            attended_at=dto.registration.attended_at,
        )
