"""FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from . import __version__, db
from .api.routes import router as api_router
from .database import DocumentContainer
from .errors import register_error_handlers
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting Todo API (prefix=%s)", settings.api_prefix or "/")
    if settings.database_url:
        logger.info("DATABASE_URL detected, enabling Postgres persistence")
        try:
            await db.init_db(
                settings.database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size,
            )
        except Exception:
            logger.exception("Failed to initialize database connection")
            raise
    else:
        logger.info("DATABASE_URL not set, using in-memory document storage")

    yield

    logger.info("Shutting down Todo API...")
    await db.close_db()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="A minimal todo API with CRUD and completion toggling",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = DocumentContainer()

    register_error_handlers(app)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()
