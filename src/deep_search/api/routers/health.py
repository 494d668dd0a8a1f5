"""Health check endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ... import __version__
from ...config import Settings
from ...service import default_credentials
from ..dependencies import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Service readiness.

    ``degraded`` means no default Google credentials are configured, so every
    request has to bring its own ``google_api_key`` and ``google_cx``.
    """

    status: str
    version: str
    credentials_configured: bool
    fetch_concurrency: int
    fetch_max_attempts: int
    fetch_timeout_seconds: float


@router.get("/health", response_model=HealthResponse)
async def health_check(config: Settings = Depends(get_settings)) -> HealthResponse:
    configured = default_credentials(config).is_complete

    return HealthResponse(
        status="ok" if configured else "degraded",
        version=__version__,
        credentials_configured=configured,
        fetch_concurrency=config.fetch_concurrency,
        fetch_max_attempts=config.fetch_max_attempts,
        fetch_timeout_seconds=config.fetch_timeout_seconds,
    )
