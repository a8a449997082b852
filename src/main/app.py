"""
FastAPI application factory for the carts health service.

Logging is configured from the same settings object the container is built
from, and every request runs with its request id bound into the structlog
context so log lines emitted while serving it can be correlated.
"""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI, Request

from src.main.config import AppSettings, get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import cart_health_router, health_router
from src.shared import get_logger, update_logging_from_settings

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(timezone.utc)
    logger.info(
        "app.startup",
        environment=app.state.settings.environment.value,
        role_name=app.state.settings.telemetry.role_name,
    )

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


async def bind_request_context(request: Request, call_next):
    """Bind the caller's request id (or a fresh one) for the request's logs."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the application from settings.

    Args:
        settings: Application settings; read from the environment when omitted

    Returns:
        FastAPI: Application with both health routers mounted
    """
    settings = settings or get_settings()

    update_logging_from_settings(settings)
    init_container(settings)

    app = FastAPI(
        title=settings.api.title,
        description=settings.api.description,
        version=settings.api.version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.middleware("http")(bind_request_context)

    app.include_router(cart_health_router)
    app.include_router(health_router)

    return app


app = create_app()
