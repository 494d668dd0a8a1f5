"""Google Custom Search JSON API client."""

from typing import Any

import httpx
import structlog

from ..config import settings
from ..errors import MissingCredentials, ProviderError
from ..models.params import Credentials
from ..models.search_result import SearchKind, SearchResult
from ..scraper.http import ClientFactory

logger = structlog.get_logger()


def normalize_items(payload: dict[str, Any]) -> list[SearchResult]:
    """Map a provider response body to ranked search results.

    Position is the 1-based index in provider order. The publication date is
    taken from the first metatags entry when present and is not validated.

    Args:
        payload: Decoded JSON body of a Custom Search response

    Returns:
        List of SearchResult, empty when the response has no items
    """
    items = payload.get("items") or []
    results = []

    for position, item in enumerate(items, start=1):
        results.append(
            SearchResult(
                title=item.get("title") or "",
                link=item.get("link") or "",
                snippet=item.get("snippet") or "",
                position=position,
                date=_published_time(item),
            )
        )

    return results


def _published_time(item: dict[str, Any]) -> str | None:
    metatags = (item.get("pagemap") or {}).get("metatags") or []
    if not metatags or not isinstance(metatags[0], dict):
        return None
    return metatags[0].get("article:published_time")


class GoogleSearchClient:
    """Issues queries to the Custom Search API."""

    MAX_RESULTS_PER_CALL = 10

    def __init__(
        self,
        client_factory: ClientFactory | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize search client.

        Args:
            client_factory: Factory for HTTP clients
            endpoint: Custom Search endpoint URL
            timeout: Request timeout in seconds
        """
        self.clients = client_factory or ClientFactory()
        self.endpoint = endpoint or settings.search_endpoint
        self.timeout = timeout or settings.search_timeout_seconds

    def build_params(
        self,
        query: str,
        num_results: int,
        kind: SearchKind,
        credentials: Credentials,
    ) -> dict[str, str]:
        """Build the query string parameters for one provider call."""
        params = {
            "key": credentials.api_key.get_secret_value(),
            "cx": credentials.cx,
            "q": query,
            "num": str(min(num_results, self.MAX_RESULTS_PER_CALL)),
        }

        if kind == SearchKind.NEWS:
            params["sort"] = "date"
        elif kind == SearchKind.IMAGES:
            params["searchType"] = "image"

        return params

    async def search(
        self,
        query: str,
        credentials: Credentials,
        num_results: int = 10,
        kind: SearchKind = SearchKind.WEB,
    ) -> list[SearchResult]:
        """Search the provider.

        Args:
            query: Provider query text, domain filters already applied
            credentials: Resolved credentials
            num_results: Requested result count, clamped to the per-call maximum
            kind: Search kind

        Returns:
            Ranked list of SearchResult, possibly empty

        Raises:
            MissingCredentials: If credentials are incomplete
            ProviderError: If the provider responds with a non-success status
        """
        if not credentials.is_complete:
            raise MissingCredentials("Google API key and search engine ID are required")

        params = self.build_params(query, num_results, kind, credentials)
        logger.info("search_request", query=query, num=params["num"], kind=kind.value)

        async with self.clients.new_client(timeout=self.timeout) as client:
            response = await client.get(self.endpoint, params=params)

        if not response.is_success:
            logger.warning("search_provider_error", status_code=response.status_code)
            raise ProviderError(response.status_code, response.reason_phrase, response.text)

        payload = response.json()
        results = normalize_items(payload)

        logger.info(
            "search_complete",
            query=query,
            results=len(results),
            total_results=(payload.get("searchInformation") or {}).get("totalResults"),
        )
        return results
