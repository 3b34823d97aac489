"""CoachHub Admin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map every failure to the {status, message} envelope
    - CORS headers on every response, OPTIONS answered before routing
    - Server state: UNINITIALIZED -> CONNECTING -> LISTENING -> STOPPED; a failed
      datastore connection aborts startup (no retry)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory + module-level app: uvicorn imports app, tests build their own
    - redirect_slashes off: a trailing slash is a different (unknown) route, not a redirect
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.cors import register_cors
from app.api.error_handlers import register_error_handlers
from app.api.routes import admin, credit_packages, health, skills
from app.config import get_settings
from app.core.domain_types import ServerState
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app.state.server_state = ServerState.CONNECTING
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await manager.connect(synchronize=settings.db_synchronize)
    except Exception:
        logger.critical("Database connection failed", exc_info=True)
        await close_db()
        app.state.server_state = ServerState.STOPPED
        raise
    logger.info("Database connected")

    app.state.server_state = ServerState.LISTENING
    logger.info(f"CoachHub API started, port: {settings.port}")
    yield
    await close_db()
    app.state.server_state = ServerState.STOPPED
    logger.info("CoachHub API shut down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="CoachHub Admin API",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.server_state = ServerState.UNINITIALIZED

    register_cors(app, settings.cors_allow_origin)
    register_error_handlers(app, settings.cors_allow_origin)

    # Routes: explicit registration (ExMA: no convention-over-config)
    app.include_router(health.router)
    app.include_router(credit_packages.router)
    app.include_router(skills.router)
    app.include_router(admin.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
