"""Pytest fixtures for Deep Search tests."""

from typing import Callable

import httpx
import pytest

from deep_search.models.params import Credentials
from deep_search.scraper.batch_fetcher import BatchFetcher
from deep_search.scraper.http import ClientFactory
from deep_search.scraper.page_fetcher import PageFetcher
from deep_search.search.google import GoogleSearchClient
from deep_search.service import DeepSearchService

SEARCH_ENDPOINT = "https://customsearch.googleapis.com/customsearch/v1"

ARTICLE_PARAGRAPH = (
    "Rust is a systems programming language focused on safety, speed and "
    "concurrency. Its ownership model guarantees memory safety without a "
    "garbage collector, which makes it a popular choice for performance "
    "critical software such as browsers, databases and operating systems."
)


class RecordingSleep:
    """Stands in for asyncio.sleep and records the requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def credentials():
    return Credentials(api_key="test-key", cx="test-cx")


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def provider_payload():
    """Custom Search response with three items."""
    return {
        "searchInformation": {"totalResults": "1234"},
        "items": [
            {
                "title": "The Rust Programming Language",
                "link": "https://a.com/book",
                "snippet": "Learn Rust",
                "pagemap": {
                    "metatags": [{"article:published_time": "2024-05-01T10:00:00Z"}]
                },
            },
            {
                "title": "Rust by Example",
                "link": "https://b.com/example",
                "snippet": "Examples of Rust code",
            },
            {
                "link": "https://c.com/missing",
            },
        ],
    }


@pytest.fixture
def article_html():
    paragraphs = "\n".join(f"<p>{ARTICLE_PARAGRAPH}</p>" for _ in range(4))
    return f"""
    <html>
      <head>
        <title>Why Rust</title>
        <meta property="og:title" content="OG Why Rust">
      </head>
      <body>
        <nav><a href="/">Home</a> | <a href="/about">About</a></nav>
        <article>
          <h1>Why Rust</h1>
          {paragraphs}
        </article>
        <footer>Copyright footer text</footer>
      </body>
    </html>
    """


def page_fetcher_for(
    handler: Callable[[httpx.Request], httpx.Response],
    sleep=None,
    **kwargs,
) -> PageFetcher:
    """Build a PageFetcher whose requests are answered by ``handler``."""
    return PageFetcher(
        client_factory=ClientFactory(transport=httpx.MockTransport(handler)),
        sleep=sleep or RecordingSleep(),
        **kwargs,
    )


def service_for(
    handler: Callable[[httpx.Request], httpx.Response],
    credentials: Credentials | None = None,
    sleep=None,
) -> DeepSearchService:
    """Build a DeepSearchService whose network is answered by ``handler``."""
    factory = ClientFactory(transport=httpx.MockTransport(handler))
    fetcher = PageFetcher(client_factory=factory, sleep=sleep or RecordingSleep())
    return DeepSearchService(
        search_client=GoogleSearchClient(client_factory=factory, endpoint=SEARCH_ENDPOINT),
        batch_fetcher=BatchFetcher(page_fetcher=fetcher, concurrency=5),
        credentials=credentials if credentials is not None else Credentials(),
    )
