"""Search provider access."""

from .credentials import resolve_credentials
from .google import GoogleSearchClient, normalize_items
from .query import build_query

__all__ = ["GoogleSearchClient", "build_query", "normalize_items", "resolve_credentials"]
