"""Dependency injection for FastAPI."""

from ..config import Settings, settings
from ..service import DeepSearchService


async def get_settings() -> Settings:
    """Get the process settings."""
    return settings


async def get_service() -> DeepSearchService:
    """Get a search service for one request.

    A fresh service per request keeps invocations independent.
    """
    return DeepSearchService()
