"""Search API endpoints.

Operation failures are reported in the response body through ``is_error``;
only malformed request bodies produce HTTP errors.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...models.params import Credentials
from ...models.report import ToolResponse
from ...models.search_result import SearchKind
from ...service import DeepSearchService
from ..dependencies import get_service

router = APIRouter()


class SearchRequest(BaseModel):
    """Request body shared by all search operations."""

    query: str = Field(..., description="Search query")
    num_results: int = Field(default=10, description="Number of results (1-10)")
    google_api_key: str | None = Field(default=None, description="Overrides the server key")
    google_cx: str | None = Field(default=None, description="Overrides the server engine ID")

    def credentials(self) -> Credentials | None:
        if self.google_api_key is None and self.google_cx is None:
            return None
        return Credentials(api_key=self.google_api_key, cx=self.google_cx)


class DeepSearchRequest(SearchRequest):
    """Request body for a deep search."""

    max_content_per_page: int | None = Field(
        default=None, description="Characters per page (5000-100000)"
    )
    search_type: SearchKind = Field(default=SearchKind.WEB)
    include_domains: str | None = Field(
        default=None, description="Comma-separated domains to include"
    )
    exclude_domains: str | None = Field(
        default=None, description="Comma-separated domains to exclude"
    )


class NewsSearchRequest(SearchRequest):
    """Request body for a news deep search."""

    max_content_per_page: int | None = Field(
        default=None, description="Characters per article (5000-100000)"
    )


@router.post("/search", response_model=ToolResponse)
async def search(
    request: SearchRequest,
    service: DeepSearchService = Depends(get_service),
) -> ToolResponse:
    """Search and return result snippets only."""
    return await service.simple_search(
        request.query,
        num_results=request.num_results,
        credentials=request.credentials(),
    )


@router.post("/deep-search", response_model=ToolResponse)
async def deep_search(
    request: DeepSearchRequest,
    service: DeepSearchService = Depends(get_service),
) -> ToolResponse:
    """Search and return the full content of the top result pages."""
    return await service.deep_search(
        request.query,
        num_results=request.num_results,
        max_content_per_page=request.max_content_per_page,
        search_type=request.search_type,
        include_domains=request.include_domains,
        exclude_domains=request.exclude_domains,
        credentials=request.credentials(),
    )


@router.post("/deep-search/news", response_model=ToolResponse)
async def deep_search_news(
    request: NewsSearchRequest,
    service: DeepSearchService = Depends(get_service),
) -> ToolResponse:
    """Search recent news and return the full article content."""
    return await service.deep_search_news(
        request.query,
        num_results=request.num_results,
        max_content_per_page=request.max_content_per_page,
        credentials=request.credentials(),
    )
