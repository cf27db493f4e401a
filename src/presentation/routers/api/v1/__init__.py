"""API v1 routers.

Resources:
    /api/v1/auth           - Sign-up, OTP verification, login, logout
    /api/v1/events         - Event catalog
    /api/v1/registrations  - Registrations and attendance check-in
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import router as auth_router
from src.presentation.routers.api.v1.events import router as events_router
from src.presentation.routers.api.v1.registrations import (
    router as registrations_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(events_router)
v1_router.include_router(registrations_router)

__all__ = [
    "v1_router",
]
