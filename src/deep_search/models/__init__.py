"""Pydantic models for Deep Search data structures."""

from .fetch import FetchOutcome
from .params import Credentials, SearchParameters, parse_domains
from .report import Report, ToolResponse
from .search_result import SearchKind, SearchResult

__all__ = [
    "Credentials",
    "FetchOutcome",
    "Report",
    "SearchKind",
    "SearchParameters",
    "SearchResult",
    "ToolResponse",
    "parse_domains",
]
