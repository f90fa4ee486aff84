"""Travel Booking API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_base_path (no auto-discovery)
    - Global error handlers map BookingError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import airports, health, passengers
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Travel Booking API started")
    yield
    await close_db()
    logger.info("Travel Booking API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title=settings.api_title, version=settings.api_version,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    base = settings.api_base_path
    application.include_router(health.router, prefix=base)
    application.include_router(airports.router, prefix=base)
    application.include_router(passengers.router, prefix=base)

    register_error_handlers(application)
    return application


app = create_app()
