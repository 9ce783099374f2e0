"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, stats_service.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stats_service import __version__
from stats_service.api.exception_handlers import (
    register_exception_handlers,
    unhandled_exception_handler,
)
from stats_service.boundary.db import dispose_async_engine
from stats_service.configs import get_settings
from stats_service.observability.logger import configure_logging
from stats_service.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import courses_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    # Shutdown
    await dispose_async_engine()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Study Stats API",
        description="Per-user, per-course study session statistics",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware; the last added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware, error_handler=unhandled_exception_handler)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(courses_router)

    return app


app = create_app()


if __name__ == "__main__":
    server = get_settings().server
    uvicorn.run(
        "stats_service.api.main:app",
        host=server.host,
        port=server.port,
    )
