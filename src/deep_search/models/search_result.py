"""Normalized search provider results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SearchKind(str, Enum):
    """Kind of search requested from the provider."""

    WEB = "web"
    NEWS = "news"
    IMAGES = "images"


class SearchResult(BaseModel):
    """One provider hit, ranked by its position in the provider response."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str
    snippet: str = ""
    position: int = Field(..., ge=1, description="1-based provider rank")
    date: str | None = Field(default=None, description="Provider-supplied publication date")
