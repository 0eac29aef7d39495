"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); fallback router last
    - Global error handlers map every failure → {success, status, message}
    - CORS configured from settings (not hardcoded)
    - Database handle created on startup and disposed on shutdown via lifespan,
      stored on app.state.db_manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Unreachable database at startup is logged, not fatal: requests fail with
      500 until it comes back
    - run() reads host/port from settings so `exercise-tracker` works without
      a uvicorn command line
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import exercises, fallback, health, pages, users
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.connect(create_tables=settings.database_create_tables)
    app.state.db_manager = db_manager
    logger.info("Exercise Tracker API started")
    yield
    logger.info("Exercise Tracker API shutting down")
    await db_manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with middleware, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(exercises.router)
    app.mount("/public", StaticFiles(directory=pages.PUBLIC_DIR), name="public")
    # Catch-all: must stay after every other route and mount
    app.include_router(fallback.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
