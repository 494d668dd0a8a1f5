"""HTTP client construction for provider calls and page retrieval."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx


class ClientFactory:
    """Creates short-lived httpx clients.

    Each pipeline stage opens its own client so no connection or buffer is
    shared across URLs or invocations.
    """

    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )

    BROWSER_HEADERS = {
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    }

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize client factory.

        Args:
            transport: Optional transport override (e.g. ``httpx.MockTransport``)
        """
        self.transport = transport

    @asynccontextmanager
    async def new_client(
        self,
        timeout: float | None = None,
        browser_headers: bool = False,
    ) -> AsyncGenerator[httpx.AsyncClient, None]:
        """Create a new client.

        Args:
            timeout: Per-request timeout in seconds
            browser_headers: Send the browser-like header set on every request

        Yields:
            Configured ``httpx.AsyncClient``
        """
        client = httpx.AsyncClient(
            headers=self.BROWSER_HEADERS if browser_headers else None,
            timeout=timeout,
            follow_redirects=True,
            transport=self.transport,
        )
        try:
            yield client
        finally:
            await client.aclose()
