from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import get_message_repository, get_user_repository
from .presentation.api.v1 import admin, health, messages
from .presentation.errors import register_error_handlers
from .presentation.middleware import CorrelationIdMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        "Starting application",
        service=settings.service_name,
        seed_demo_data=settings.seed_demo_data,
        timezone=settings.timezone,
    )

    # Build the in-memory stores up front so seeding happens at startup
    get_message_repository()
    get_user_repository()

    yield

    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    configure_logging(settings.service_name, settings.log_level)

    app = FastAPI(
        title="Message Scheduler API",
        description="Schedule and review email and chat notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(messages.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    @app.get("/")
    def root() -> dict:
        return {
            "service": settings.service_name,
            "version": "0.1.0",
            "docs": "/docs",
        }

    return app


app = create_app()
