"""System router for non-versioned application endpoints.

Root, liveness, readiness and a development-only configuration dump. These endpoints
are side-effect free so load balancers can poll them.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from src.core.config import settings
from src.core.container import get_database, get_logger, get_redis


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check for monitoring and load balancers."""
    return {"status": "healthy"}


@system_router.get("/health/ready")
async def readiness() -> JSONResponse:
    """Readiness check: database and session store must both answer.

    Returns:
        JSONResponse: 200 when ready, 503 naming the failing dependency.
    """
    checks = {"database": await get_database().check_connection()}
    try:
        checks["sessions"] = bool(await get_redis().ping())
    except RedisError as e:
        get_logger().warning("session_store_unreachable", error_message=str(e))
        checks["sessions"] = False

    ready = all(checks.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "ready" if ready else "unavailable", "checks": checks},
    )


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Sanitized configuration, or 403 outside development.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "database": {
                "url": "<redacted>",  # Never expose credentials
                "echo": settings.db_echo,
            },
            "sessions": {
                "url": "<redacted>",
                "cookie_name": settings.session_cookie_name,
                "ttl_days": settings.session_ttl_days,
            },
            "cors": {
                "origins": settings.cors_origins,
            },
        }
    )
