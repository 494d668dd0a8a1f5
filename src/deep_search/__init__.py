"""Deep Search: web search with full-page content extraction."""

__version__ = "0.1.0"
