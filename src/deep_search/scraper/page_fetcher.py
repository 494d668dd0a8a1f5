"""Page retrieval with timeout and retry/backoff."""

import asyncio
from typing import Awaitable, Callable

import httpx
import structlog

from ..config import settings
from ..errors import ClientHttpError, FetchTimeout, RetrievalExhausted, UnsupportedContent
from ..models.fetch import FetchOutcome
from .content_extractor import ContentExtractor
from .http import ClientFactory

logger = structlog.get_logger()

TRUNCATION_MARKER = "\n\n[Content truncated...]"

TEXT_CONTENT_TYPES = ("application/xhtml+xml", "application/xml")


def is_text_content(content_type: str) -> bool:
    """Whether a Content-Type header denotes a text document.

    A missing header is accepted.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    return not media_type or media_type.startswith("text/") or media_type in TEXT_CONTENT_TYPES


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, appending the truncation marker if cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


class PageFetcher:
    """Fetches pages and turns them into FetchOutcomes."""

    def __init__(
        self,
        client_factory: ClientFactory | None = None,
        extractor: ContentExtractor | None = None,
        max_attempts: int | None = None,
        timeout: float | None = None,
        backoff_base: float | None = None,
        max_content_length: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize page fetcher.

        Args:
            client_factory: Factory for HTTP clients
            extractor: Content extractor for fetched HTML
            max_attempts: Total attempts per URL
            timeout: Timeout per attempt in seconds
            backoff_base: Base delay for exponential backoff in seconds
            max_content_length: Ceiling on extracted text length
            sleep: Coroutine used to wait between attempts
        """
        self.clients = client_factory or ClientFactory()
        self.extractor = extractor or ContentExtractor()
        self.max_attempts = max_attempts or settings.fetch_max_attempts
        self.timeout = timeout or settings.fetch_timeout_seconds
        self.backoff_base = (
            backoff_base if backoff_base is not None else settings.fetch_backoff_base_seconds
        )
        self.max_content_length = max_content_length or settings.fetch_max_content_length
        self.sleep = sleep

    async def fetch_raw(self, url: str) -> str:
        """Fetch the raw body of ``url``.

        Client errors other than 429 and timeouts end retrying immediately;
        429, 5xx and transport errors are retried with exponential backoff.

        Args:
            url: Page URL

        Returns:
            Response body text

        Raises:
            FetchTimeout: If an attempt timed out
            ClientHttpError: On a non-retryable 4xx status
            UnsupportedContent: If the body is not a text document
            RetrievalExhausted: When every attempt failed
        """
        last_error: str | None = None

        for attempt in range(self.max_attempts):
            try:
                async with self.clients.new_client(
                    timeout=self.timeout, browser_headers=True
                ) as client:
                    response = await asyncio.wait_for(client.get(url), timeout=self.timeout)
            except (asyncio.TimeoutError, httpx.TimeoutException):
                logger.warning("fetch_timeout", url=url, attempt=attempt + 1)
                raise FetchTimeout(url, attempt + 1, self.timeout)
            except httpx.HTTPError as e:
                last_error = str(e) or type(e).__name__
                logger.debug("fetch_attempt_failed", url=url, attempt=attempt + 1, error=last_error)
            else:
                if response.is_success:
                    content_type = response.headers.get("content-type", "")
                    if not is_text_content(content_type):
                        logger.debug("fetch_unsupported_content", url=url, content_type=content_type)
                        raise UnsupportedContent(url, attempt + 1, content_type)
                    return response.text

                status = response.status_code
                if 400 <= status < 500 and status != 429:
                    logger.debug("fetch_client_error", url=url, status_code=status)
                    raise ClientHttpError(url, attempt + 1, status)

                last_error = f"HTTP {status}"
                logger.debug("fetch_attempt_failed", url=url, attempt=attempt + 1, error=last_error)

            if attempt < self.max_attempts - 1:
                await self.sleep(self.backoff_base * 2**attempt)

        raise RetrievalExhausted(url, self.max_attempts, last_error or "Max retries exceeded")

    async def fetch_page(self, url: str) -> FetchOutcome:
        """Fetch a page and extract its title and article text.

        The word count is taken before the content is capped.

        Args:
            url: Page URL

        Returns:
            FetchOutcome, failure-shaped when retrieval failed
        """
        try:
            html = await self.fetch_raw(url)
        except RetrievalExhausted as e:
            logger.info("fetch_failed", url=url, attempts=e.attempts, error=str(e))
            return FetchOutcome.failure(url, str(e))

        title = self.extractor.extract_title(html)
        text = self.extractor.extract(html, url)
        word_count = len(text.split())

        return FetchOutcome(
            url=url,
            title=title,
            content=truncate(text, self.max_content_length),
            success=True,
            word_count=word_count,
        )
