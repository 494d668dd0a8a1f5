"""Search operations exposed to callers.

Every operation returns a ToolResponse and never raises: failures are turned
into an error-flagged text message.
"""

import time

from pydantic import ValidationError
import structlog

from .config import Settings, settings
from .models.params import Credentials, SearchParameters
from .models.report import Report, ToolResponse
from .models.search_result import SearchKind
from .report.formatter import format_deep_report, format_simple_report
from .scraper.batch_fetcher import BatchFetcher
from .search.credentials import resolve_credentials
from .search.google import GoogleSearchClient
from .search.query import build_query

logger = structlog.get_logger()


def default_credentials(config: Settings | None = None) -> Credentials:
    """Process-wide credentials taken from settings."""
    config = config or settings
    return Credentials(api_key=config.google_api_key, cx=config.google_cx)


def describe_error(error: Exception) -> str:
    """Render an exception as a single caller-facing line."""
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
            for item in error.errors()
        )
    return str(error) or type(error).__name__


class DeepSearchService:
    """Runs the search, fetch, extract and format pipeline."""

    def __init__(
        self,
        search_client: GoogleSearchClient | None = None,
        batch_fetcher: BatchFetcher | None = None,
        credentials: Credentials | None = None,
        config: Settings | None = None,
    ):
        """Initialize the service.

        Args:
            search_client: Search provider client
            batch_fetcher: Fetcher for result pages
            credentials: Process default credentials (settings when omitted)
            config: Settings providing report defaults
        """
        self.config = config or settings
        self.search_client = search_client or GoogleSearchClient()
        self.batch_fetcher = batch_fetcher or BatchFetcher()
        self.default_credentials = (
            credentials if credentials is not None else default_credentials(self.config)
        )

    async def run_deep_search(self, params: SearchParameters) -> Report | None:
        """Search, fetch every result page and build the report.

        Credentials are resolved once here and passed down explicitly.

        Args:
            params: Validated parameters

        Returns:
            The report, or None when the provider returned no results

        Raises:
            MissingCredentials: If no credentials can be resolved
            ProviderError: If the search provider call failed
        """
        start_time = time.time()
        credentials = resolve_credentials(params.credentials, self.default_credentials)
        search_query = build_query(params.query, params.include_domains, params.exclude_domains)

        search_results = await self.search_client.search(
            search_query,
            credentials=credentials,
            num_results=params.num_results,
            kind=params.search_type,
        )
        if not search_results:
            return None

        outcomes = await self.batch_fetcher.fetch_all([result.link for result in search_results])
        report = format_deep_report(
            params.query,
            search_results,
            outcomes,
            params.max_content_per_page,
            params.search_type,
        )

        logger.info(
            "deep_search_complete",
            query=params.query,
            results=report.result_count,
            fetched=report.successful_fetches,
            words=report.total_words,
            duration=f"{time.time() - start_time:.2f}s",
        )
        return report

    async def simple_search(
        self,
        query: str,
        num_results: int = 10,
        credentials: Credentials | None = None,
    ) -> ToolResponse:
        """Search and list results with their snippets, without fetching pages."""
        try:
            params = SearchParameters(
                query=query, num_results=num_results, credentials=credentials
            )
            resolved = resolve_credentials(params.credentials, self.default_credentials)
            search_results = await self.search_client.search(
                params.query, credentials=resolved, num_results=params.num_results
            )
        except Exception as e:
            logger.error("search_failed", query=query, error=describe_error(e))
            return ToolResponse(text=f"Error performing search: {describe_error(e)}", is_error=True)

        if not search_results:
            return ToolResponse(text=f'No search results found for: "{query}"')

        return ToolResponse(text=format_simple_report(query, search_results))

    async def deep_search(
        self,
        query: str,
        num_results: int = 10,
        max_content_per_page: int | None = None,
        search_type: SearchKind | str = SearchKind.WEB,
        include_domains: str | list[str] | None = None,
        exclude_domains: str | list[str] | None = None,
        credentials: Credentials | None = None,
    ) -> ToolResponse:
        """Search and return the full content of every result page."""
        try:
            params = SearchParameters(
                query=query,
                num_results=num_results,
                max_content_per_page=(
                    self.config.default_max_content_per_page
                    if max_content_per_page is None
                    else max_content_per_page
                ),
                search_type=search_type,
                include_domains=include_domains,
                exclude_domains=exclude_domains,
                credentials=credentials,
            )
            report = await self.run_deep_search(params)
        except Exception as e:
            logger.error("deep_search_failed", query=query, error=describe_error(e))
            return ToolResponse(
                text=f"Error performing deep search: {describe_error(e)}", is_error=True
            )

        if report is None:
            return ToolResponse(text=f'No search results found for: "{query}"')

        return ToolResponse(text=report.text)

    async def deep_search_news(
        self,
        query: str,
        num_results: int = 10,
        max_content_per_page: int | None = None,
        credentials: Credentials | None = None,
    ) -> ToolResponse:
        """Search recent news and return the full content of every article."""
        try:
            params = SearchParameters(
                query=query,
                num_results=num_results,
                max_content_per_page=(
                    self.config.default_news_max_content_per_page
                    if max_content_per_page is None
                    else max_content_per_page
                ),
                search_type=SearchKind.NEWS,
                credentials=credentials,
            )
            report = await self.run_deep_search(params)
        except Exception as e:
            logger.error("news_search_failed", query=query, error=describe_error(e))
            return ToolResponse(
                text=f"Error performing news search: {describe_error(e)}", is_error=True
            )

        if report is None:
            return ToolResponse(text=f'No news results found for: "{query}"')

        return ToolResponse(text=report.text)
