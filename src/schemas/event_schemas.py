"""Event catalog request/response schemas."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import EventDetail, EventView
from src.domain.entities import Event
from src.domain.types import Capacity, EventText, EventTitle
from src.schemas.common_schemas import PersonResponse


# =============================================================================
# Requests
# =============================================================================


class EventCreateRequest(BaseModel):
    """Request schema for event creation.

    POST /api/v1/events
    Returns: 201 Created
    """

    title: EventTitle
    description: EventText
    date: dt.date
    time: EventText = Field(..., description="Display time, e.g. 9:00 AM - 5:00 PM")
    venue: EventText
    image_url: EventText = Field(..., description="Banner image URL")
    max_capacity: Capacity | None = Field(
        default=None,
        description="Maximum registrations (defaults to 200)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Tech Fest 2025",
                "description": "Annual technology festival",
                "date": "2025-03-15",
                "time": "9:00 AM - 5:00 PM",
                "venue": "Main Auditorium",
                "image_url": "https://images.unsplash.com/photo-1540575467063",
                "max_capacity": 500,
            }
        }
    )


class EventUpdateRequest(BaseModel):
    """Partial update: omitted fields keep their current value.

    PUT /api/v1/events/{event_id}
    """

    title: EventTitle | None = None
    description: EventText | None = None
    date: dt.date | None = None
    time: EventText | None = None
    venue: EventText | None = None
    image_url: EventText | None = None
    max_capacity: Capacity | None = None


# =============================================================================
# Responses
# =============================================================================


class EventSummaryResponse(BaseModel):
    """Event fields without organiser or roster (embedded in registrations)."""

    id: UUID
    title: str
    description: str
    date: dt.date
    time: str
    venue: str
    image_url: str
    max_capacity: int
    registered_count: int
    seats_remaining: int

    @classmethod
    def from_entity(cls, event: Event) -> "EventSummaryResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            time=event.time,
            venue=event.venue,
            image_url=event.image_url,
            max_capacity=event.max_capacity,
            registered_count=event.registered_count,
            seats_remaining=event.seats_remaining,
        )


class EventResponse(EventSummaryResponse):
    """Event with its organiser."""

    organiser: PersonResponse | None
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_dto(cls, dto: EventView) -> "EventResponse":
        summary = EventSummaryResponse.from_entity(dto.event)
        return cls(
            **summary.model_dump(),
            organiser=PersonResponse.from_dto(dto.organiser) if dto.organiser else None,
            created_at=dto.event.created_at,
            updated_at=dto.event.updated_at,
        )


class EventDetailResponse(EventResponse):
    """Event with organiser and registered attendees."""

    registered_students: list[PersonResponse] = Field(default_factory=list)

    @classmethod
    def from_detail(cls, dto: EventDetail) -> "EventDetailResponse":
        base = EventResponse.from_dto(dto)
        return cls(
            **base.model_dump(exclude={"organiser"}),
            organiser=base.organiser,
            registered_students=[PersonResponse.from_dto(p) for p in dto.attendees],
        )


class EventMutationResponse(BaseModel):
    """Response for create and update."""

    message: str
    event: EventResponse


class EventDeleteResponse(BaseModel):
    message: str = "Event deleted successfully"
    registrations_removed: int = 0


class IsOrganiserResponse(BaseModel):
    is_organiser: bool
