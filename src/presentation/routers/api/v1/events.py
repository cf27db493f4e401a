"""Events resource router.

Endpoints:
    GET    /api/v1/events                    - List events (soonest first)
    GET    /api/v1/events/{id}               - Event detail with attendees
    GET    /api/v1/events/{id}/is-organiser  - Whether the caller organises it
    POST   /api/v1/events                    - Create event (admin)
    PUT    /api/v1/events/{id}               - Update event (organiser)
    DELETE /api/v1/events/{id}               - Delete event (organiser)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateEvent, DeleteEvent, UpdateEvent
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.delete_event_handler import DeleteEventHandler
from src.application.commands.handlers.update_event_handler import UpdateEventHandler
from src.application.queries import GetEvent, IsEventOrganiser, ListEvents
from src.application.queries.handlers.event_query_handlers import (
    GetEventHandler,
    IsEventOrganiserHandler,
    ListEventsHandler,
)
from src.core.container import (
    get_create_event_handler,
    get_delete_event_handler,
    get_get_event_handler,
    get_is_event_organiser_handler,
    get_list_events_handler,
    get_update_event_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    AdminAuth,
    CurrentAuth,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.event_schemas import (
    EventCreateRequest,
    EventDeleteResponse,
    EventDetailResponse,
    EventMutationResponse,
    EventResponse,
    EventUpdateRequest,
    IsOrganiserResponse,
)

router = APIRouter(prefix="/events", tags=["Events"])

_NOT_FOUND = {404: {"description": "Event not found", "model": ProblemDetails}}
_FORBIDDEN = {
    401: {"description": "Not signed in", "model": ProblemDetails},
    403: {"description": "Not the organiser", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=list[EventResponse],
    summary="List events",
)
async def list_events(
    request: Request,
    handler: ListEventsHandler = Depends(get_list_events_handler),
) -> list[EventResponse] | JSONResponse:
    """GET /api/v1/events → 200 OK, sorted by date ascending"""
    match await handler.handle(ListEvents()):
        case Success(value=views):
            return [EventResponse.from_dto(view) for view in views]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/{event_id}",
    response_model=EventDetailResponse,
    responses=_NOT_FOUND,
    summary="Get event",
)
async def get_event(
    request: Request,
    event_id: UUID,
    handler: GetEventHandler = Depends(get_get_event_handler),
) -> EventDetailResponse | JSONResponse:
    """GET /api/v1/events/{event_id} → 200 OK"""
    match await handler.handle(GetEvent(event_id=event_id)):
        case Success(value=detail):
            return EventDetailResponse.from_detail(detail)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/{event_id}/is-organiser",
    response_model=IsOrganiserResponse,
    responses=_NOT_FOUND,
    summary="Check organiser",
)
async def is_organiser(
    request: Request,
    event_id: UUID,
    auth: CurrentAuth,
    handler: IsEventOrganiserHandler = Depends(get_is_event_organiser_handler),
) -> IsOrganiserResponse | JSONResponse:
    """GET /api/v1/events/{event_id}/is-organiser → 200 OK"""
    match await handler.handle(IsEventOrganiser(auth=auth, event_id=event_id)):
        case Success(value=flag):
            return IsOrganiserResponse(is_organiser=flag)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EventMutationResponse,
    responses=_FORBIDDEN,
    summary="Create event",
)
async def create_event(
    request: Request,
    data: EventCreateRequest,
    auth: AdminAuth,
    handler: CreateEventHandler = Depends(get_create_event_handler),
) -> EventMutationResponse | JSONResponse:
    """POST /api/v1/events → 201 Created

    The caller becomes the event's organiser.
    """
    command = CreateEvent(
        auth=auth,
        title=data.title,
        description=data.description,
        date=data.date,
        time=data.time,
        venue=data.venue,
        image_url=data.image_url,
        max_capacity=data.max_capacity,
    )

    match await handler.handle(command):
        case Success(value=view):
            return EventMutationResponse(
                message="Event created successfully",
                event=EventResponse.from_dto(view),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.put(
    "/{event_id}",
    response_model=EventMutationResponse,
    responses={**_FORBIDDEN, **_NOT_FOUND},
    summary="Update event",
)
async def update_event(
    request: Request,
    event_id: UUID,
    data: EventUpdateRequest,
    auth: AdminAuth,
    handler: UpdateEventHandler = Depends(get_update_event_handler),
) -> EventMutationResponse | JSONResponse:
    """PUT /api/v1/events/{event_id} → 200 OK"""
    command = UpdateEvent(
        auth=auth,
        event_id=event_id,
        title=data.title,
        description=data.description,
        date=data.date,
        time=data.time,
        venue=data.venue,
        image_url=data.image_url,
        max_capacity=data.max_capacity,
    )

    match await handler.handle(command):
        case Success(value=view):
            return EventMutationResponse(
                message="Event updated successfully",
                event=EventResponse.from_dto(view),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.delete(
    "/{event_id}",
    response_model=EventDeleteResponse,
    responses={**_FORBIDDEN, **_NOT_FOUND},
    summary="Delete event",
    description="Delete the event with all of its registrations.",
)
async def delete_event(
    request: Request,
    event_id: UUID,
    auth: AdminAuth,
    handler: DeleteEventHandler = Depends(get_delete_event_handler),
) -> EventDeleteResponse | JSONResponse:
    """DELETE /api/v1/events/{event_id} → 200 OK"""
    match await handler.handle(DeleteEvent(auth=auth, event_id=event_id)):
        case Success(value=removed):
            return EventDeleteResponse(registrations_removed=removed)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
