"""Access rules shared by event, registration and check-in handlers."""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.domain.entities import Event
from src.domain.value_objects import AuthContext


def event_not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message="Event not found",
        resource_type="Event",
        resource_id=str(event_id),
    )


def admin_required() -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Admin access required",
        required_permission="admin",
    )


def organiser_check(
    auth: AuthContext, event: Event, action: str
) -> AuthorizationError | None:
    """Return an error unless ``auth`` is the admin who organises ``event``.

    Args:
        action: Verb for the message ("edit", "delete", "check in attendees for").
    """
    if not auth.is_admin:
        return admin_required()
    if not event.is_organised_by(auth.account_id):
        return AuthorizationError(
            code=ErrorCode.RESOURCE_NOT_OWNED,
            message=f"You can only {action} events you organize",
            required_permission="organiser",
        )
    return None
