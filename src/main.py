"""
Main FastAPI application entry point.

Wires middleware, exception handlers and routers, and owns process-level
startup and shutdown.

Run:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.core.config import settings
from src.core.container import (
    get_database,
    get_logger,
    get_notification_dispatcher,
    get_redis,
)
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers
from src.presentation.routers.system import system_router

SHUTDOWN_DRAIN_SECONDS = 10.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: finish pending confirmation emails, then close Redis and
      the database engine
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    dispatcher = get_notification_dispatcher()
    if dispatcher.pending:
        logger.info("draining_notifications", pending=dispatcher.pending)
    await dispatcher.drain(timeout=SHUTDOWN_DRAIN_SECONDS)

    await get_redis().aclose()
    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="College event registration with email OTP sign-up and QR tickets",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Session cookies cross origins, so credentials must be allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)

# Locally uploaded event images
Path(settings.media_root).mkdir(parents=True, exist_ok=True)
app.mount(
    settings.media_url_prefix.rstrip("/"),
    StaticFiles(directory=settings.media_root),
    name="media",
)
