"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from .. import __version__
from ..config import settings
from ..service import default_credentials
from ..utils.logging import setup_logging
from .routers import health, search

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and report whether default credentials are present."""
    setup_logging(settings.log_level, json_output=settings.log_json)

    if not default_credentials(settings).is_complete:
        logger.warning("default_credentials_missing", hint="set GOOGLE_API_KEY and GOOGLE_CX")
    logger.info("api_started", version=__version__, concurrency=settings.fetch_concurrency)

    yield

    logger.info("api_stopped")


def create_app() -> FastAPI:
    """Create the Deep Search API.

    Search operations live under ``/api/v1``; ``/health`` reports readiness.
    """
    app = FastAPI(
        title="Deep Search API",
        description="Web search with full-page content extraction",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["POST", "GET"])

    app.include_router(health.router, tags=["Health"])
    app.include_router(search.router, prefix="/api/v1", tags=["Search"])

    return app
