"""Portal API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortalError / validation errors → JSON envelopes
    - CORS configured from settings (not hardcoded)
    - Storage is created once per app and reached only through get_storage

Design Decisions:
    - create_app(storage=...) factory: tests inject a substitute Storage and the
      lifespan then leaves it alone; production builds DatabaseStorage on startup
    - Lifespan over @app.on_event: cleaner cleanup (engine disposed on shutdown)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.api.error_handlers import register_error_handlers
from portal.api.routes import analytics, client_portal, contact, engineers, health
from portal.config import get_settings
from portal.core.repository_protocols import Storage
from portal.infrastructure.database import DatabaseSessionManager
from portal.infrastructure.observability import setup_logging
from portal.infrastructure.storage import DatabaseStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = None
    if getattr(app.state, "storage", None) is None:
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        app.state.storage = DatabaseStorage(db_manager)
    logger.info("Portal API started")
    yield
    logger.info("Portal API shutting down")
    if db_manager is not None:
        await db_manager.close()


def create_app(storage: Storage | None = None) -> FastAPI:
    """Build the FastAPI app. Pass `storage` to bypass the database wiring."""
    settings = get_settings()
    app = FastAPI(title="Portal API", version="1.0.0", lifespan=lifespan)
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(contact.router)
    app.include_router(analytics.router)
    app.include_router(client_portal.router)
    app.include_router(engineers.router)

    register_error_handlers(app)
    return app


app = create_app()
