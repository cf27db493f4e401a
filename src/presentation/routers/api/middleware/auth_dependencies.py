"""Session cookie authentication dependencies.

FastAPI dependencies that resolve the session cookie into an AuthContext.
Use these to protect routes that require a signed-in account.

Usage:
    # Protected route (requires a session)
    @router.get("/my-registrations")
    async def my_registrations(auth: CurrentAuth):
        ...

    # Admin-only route
    @router.post("/events")
    async def create_event(auth: AdminAuth):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.core.config import settings
from src.core.container import get_logger, get_session_store
from src.core.result import Failure, Success
from src.domain.protocols import LoggerProtocol, SessionStoreProtocol
from src.domain.value_objects import AuthContext


async def get_session_id(request: Request) -> str | None:
    """Return the raw session id from the session cookie, if any."""
    return request.cookies.get(settings.session_cookie_name) or None


async def get_optional_auth(
    session_id: Annotated[str | None, Depends(get_session_id)],
    session_store: Annotated[SessionStoreProtocol, Depends(get_session_store)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> AuthContext | None:
    """Resolve the session cookie, returning None when not signed in.

    Raises:
        HTTPException: 503 if the session store is unreachable.
    """
    if session_id is None:
        return None

    match await session_store.get(session_id):
        case Success(value=context):
            return context
        case Failure(error=error):
            logger.error("session_lookup_failed", error_code=error.code.value)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Session service unavailable",
            )


async def get_current_auth(
    auth: Annotated[AuthContext | None, Depends(get_optional_auth)],
) -> AuthContext:
    """Require a signed-in account.

    Raises:
        HTTPException: 401 if there is no valid session.
    """
    if auth is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return auth


async def require_admin(
    auth: Annotated[AuthContext, Depends(get_current_auth)],
) -> AuthContext:
    """Require a signed-in admin.

    Raises:
        HTTPException: 403 if the caller is not an admin.
    """
    if not auth.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return auth


CurrentAuth = Annotated[AuthContext, Depends(get_current_auth)]
AdminAuth = Annotated[AuthContext, Depends(require_admin)]
