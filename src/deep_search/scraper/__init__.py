"""Page retrieval and content extraction."""

from .batch_fetcher import BatchFetcher
from .content_extractor import ContentExtractor, normalize_whitespace
from .http import ClientFactory
from .page_fetcher import TRUNCATION_MARKER, PageFetcher, truncate

__all__ = [
    "BatchFetcher",
    "ClientFactory",
    "ContentExtractor",
    "PageFetcher",
    "TRUNCATION_MARKER",
    "normalize_whitespace",
    "truncate",
]
