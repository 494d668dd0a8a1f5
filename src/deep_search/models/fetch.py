"""Per-URL retrieval and extraction outcome."""

from pydantic import BaseModel


class FetchOutcome(BaseModel):
    """Result of fetching and extracting a single page.

    Failures are represented as outcomes rather than omitted so that a batch
    stays index-aligned with its input URLs.
    """

    url: str
    title: str = ""
    content: str = ""
    success: bool
    error: str | None = None
    word_count: int | None = None

    @classmethod
    def failure(cls, url: str, error: str) -> "FetchOutcome":
        """Build a failure-shaped outcome for ``url``."""
        return cls(url=url, success=False, error=error)
