"""Registrations resource router.

Endpoints:
    POST   /api/v1/registrations                     - Register for an event
    GET    /api/v1/registrations/my-registrations    - Caller's registrations
    GET    /api/v1/registrations/check/{event_id}    - Is the caller registered
    POST   /api/v1/registrations/check-ins           - Check in a scanned token
    GET    /api/v1/registrations/{id}                - One registration (owner)
    DELETE /api/v1/registrations/{id}                - Cancel (owner)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    CancelRegistration,
    CheckInAttendee,
    RegisterForEvent,
)
from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.check_in_attendee_handler import (
    CheckInAttendeeHandler,
)
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.application.queries import (
    CheckRegistration,
    GetRegistration,
    ListMyRegistrations,
)
from src.application.queries.handlers.registration_query_handlers import (
    CheckRegistrationHandler,
    GetRegistrationHandler,
    ListMyRegistrationsHandler,
)
from src.core.container import (
    get_cancel_registration_handler,
    get_check_in_attendee_handler,
    get_check_registration_handler,
    get_get_registration_handler,
    get_list_my_registrations_handler,
    get_register_for_event_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    AdminAuth,
    CurrentAuth,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.common_schemas import MessageResponse
from src.schemas.registration_schemas import (
    CheckInRequest,
    CheckInResponse,
    RegistrationCreateRequest,
    RegistrationCreateResponse,
    RegistrationResponse,
    RegistrationStatusResponse,
)

router = APIRouter(prefix="/registrations", tags=["Registrations"])

_UNAUTHENTICATED = {401: {"description": "Not signed in", "model": ProblemDetails}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationCreateResponse,
    responses={
        **_UNAUTHENTICATED,
        400: {"description": "Already registered or event full", "model": ProblemDetails},
        404: {"description": "Event not found", "model": ProblemDetails},
    },
    summary="Register for event",
    description=(
        "Register the caller for an event. The confirmation email with the QR "
        "code is sent in the background."
    ),
)
async def register_for_event(
    request: Request,
    data: RegistrationCreateRequest,
    auth: CurrentAuth,
    handler: RegisterForEventHandler = Depends(get_register_for_event_handler),
) -> RegistrationCreateResponse | JSONResponse:
    """POST /api/v1/registrations → 201 Created"""
    match await handler.handle(RegisterForEvent(auth=auth, event_id=data.event_id)):
        case Success(value=view):
            return RegistrationCreateResponse(
                registration=RegistrationResponse.from_view(view)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/my-registrations",
    response_model=list[RegistrationResponse],
    responses=_UNAUTHENTICATED,
    summary="List my registrations",
)
async def list_my_registrations(
    request: Request,
    auth: CurrentAuth,
    handler: ListMyRegistrationsHandler = Depends(get_list_my_registrations_handler),
) -> list[RegistrationResponse] | JSONResponse:
    """GET /api/v1/registrations/my-registrations → 200 OK, newest first"""
    match await handler.handle(ListMyRegistrations(auth=auth)):
        case Success(value=views):
            return [RegistrationResponse.from_view(view) for view in views]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/check/{event_id}",
    response_model=RegistrationStatusResponse,
    responses=_UNAUTHENTICATED,
    summary="Check registration",
)
async def check_registration(
    request: Request,
    event_id: UUID,
    auth: CurrentAuth,
    handler: CheckRegistrationHandler = Depends(get_check_registration_handler),
) -> RegistrationStatusResponse | JSONResponse:
    """GET /api/v1/registrations/check/{event_id} → 200 OK"""
    match await handler.handle(CheckRegistration(auth=auth, event_id=event_id)):
        case Success(value=found):
            registration = (
                RegistrationResponse.from_entity(found.registration)
                if found.registration
                else None
            )
            return RegistrationStatusResponse(
                is_registered=found.is_registered,
                registration=registration,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/check-ins",
    response_model=CheckInResponse,
    responses={
        **_UNAUTHENTICATED,
        400: {"description": "Invalid token or already checked in", "model": ProblemDetails},
        403: {"description": "Not the event organiser", "model": ProblemDetails},
        404: {"description": "Registration not found", "model": ProblemDetails},
    },
    summary="Check in attendee",
    description="Mark the registration encoded in a scanned QR code as attended.",
)
async def check_in(
    request: Request,
    data: CheckInRequest,
    auth: AdminAuth,
    handler: CheckInAttendeeHandler = Depends(get_check_in_attendee_handler),
) -> CheckInResponse | JSONResponse:
    """POST /api/v1/registrations/check-ins → 200 OK"""
    command = CheckInAttendee(auth=auth, payload=data.payload, event_id=data.event_id)

    match await handler.handle(command):
        case Success(value=result):
            return CheckInResponse.from_dto(result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/{registration_id}",
    response_model=RegistrationResponse,
    responses={
        **_UNAUTHENTICATED,
        403: {"description": "Not your registration", "model": ProblemDetails},
        404: {"description": "Registration not found", "model": ProblemDetails},
    },
    summary="Get registration",
)
async def get_registration(
    request: Request,
    registration_id: UUID,
    auth: CurrentAuth,
    handler: GetRegistrationHandler = Depends(get_get_registration_handler),
) -> RegistrationResponse | JSONResponse:
    """GET /api/v1/registrations/{registration_id} → 200 OK"""
    query = GetRegistration(auth=auth, registration_id=registration_id)

    match await handler.handle(query):
        case Success(value=view):
            return RegistrationResponse.from_view(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.delete(
    "/{registration_id}",
    response_model=MessageResponse,
    responses={
        **_UNAUTHENTICATED,
        403: {"description": "Not your registration", "model": ProblemDetails},
        404: {"description": "Registration not found", "model": ProblemDetails},
    },
    summary="Cancel registration",
)
async def cancel_registration(
    request: Request,
    registration_id: UUID,
    auth: CurrentAuth,
    handler: CancelRegistrationHandler = Depends(get_cancel_registration_handler),
) -> MessageResponse | JSONResponse:
    """DELETE /api/v1/registrations/{registration_id} → 200 OK

    Roster cleanup is best effort. If the registration row itself cannot be
    deleted the response is a 500 problem and the call can be retried.
    """
    command = CancelRegistration(auth=auth, registration_id=registration_id)

    match await handler.handle(command):
        case Success():
            return MessageResponse(message="Registration cancelled successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
