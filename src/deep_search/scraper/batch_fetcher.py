"""Chunked concurrent fetching of many pages."""

import asyncio

import structlog

from ..config import settings
from ..models.fetch import FetchOutcome
from .page_fetcher import PageFetcher

logger = structlog.get_logger()


class BatchFetcher:
    """Fetches a list of URLs in fixed-size concurrent chunks."""

    def __init__(self, page_fetcher: PageFetcher | None = None, concurrency: int | None = None):
        """Initialize batch fetcher.

        Args:
            page_fetcher: Fetcher used for each URL
            concurrency: URLs fetched concurrently per chunk
        """
        self.fetcher = page_fetcher or PageFetcher()
        self.concurrency = concurrency if concurrency is not None else settings.fetch_concurrency

    async def fetch_all(
        self,
        urls: list[str],
        concurrency: int | None = None,
    ) -> list[FetchOutcome]:
        """Fetch every URL, one chunk at a time.

        A chunk finishes completely before the next one starts. A URL that
        fails leaves a failure outcome in its slot, so the result always has
        the same length and order as ``urls``.

        Args:
            urls: Page URLs
            concurrency: Chunk size, overriding the instance default

        Returns:
            List of FetchOutcome aligned with ``urls``
        """
        size = concurrency if concurrency is not None else self.concurrency
        if size < 1:
            raise ValueError("concurrency must be at least 1")

        results: list[FetchOutcome | None] = [None] * len(urls)
        logger.info("batch_fetch_start", urls=len(urls), concurrency=size)

        for start in range(0, len(urls), size):
            chunk = urls[start:start + size]
            outcomes = await asyncio.gather(
                *(self.fetcher.fetch_page(url) for url in chunk),
                return_exceptions=True,
            )

            for offset, outcome in enumerate(outcomes):
                index = start + offset
                if isinstance(outcome, BaseException):
                    if not isinstance(outcome, Exception):
                        raise outcome
                    logger.error("page_fetch_failed", url=urls[index], error=str(outcome))
                    results[index] = FetchOutcome.failure(
                        urls[index], str(outcome) or type(outcome).__name__
                    )
                else:
                    results[index] = outcome

            logger.debug("batch_chunk_complete", start=start, size=len(chunk))

        succeeded = sum(1 for outcome in results if outcome.success)
        logger.info("batch_fetch_complete", urls=len(urls), succeeded=succeeded)
        return results
