"""Exception types raised by the search and retrieval pipeline."""


class DeepSearchError(Exception):
    """Base class for pipeline errors."""


class MissingCredentials(DeepSearchError):
    """No API key or search engine ID is available for the provider call."""


class ProviderError(DeepSearchError):
    """The search provider answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"Google Custom Search API error: {status_code} {reason} - {body}"
        )


class RetrievalExhausted(DeepSearchError):
    """A page could not be retrieved.

    Carries the last error observed before giving up.
    """

    def __init__(self, url: str, attempts: int, last_error: str):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(last_error)


class ClientHttpError(RetrievalExhausted):
    """Terminal 4xx response; retrying cannot change the outcome."""

    def __init__(self, url: str, attempts: int, status_code: int):
        self.status_code = status_code
        super().__init__(url, attempts, f"HTTP {status_code}")


class FetchTimeout(RetrievalExhausted):
    """An attempt exceeded its timeout. Timeouts are never retried."""

    def __init__(self, url: str, attempts: int, timeout: float):
        self.timeout = timeout
        super().__init__(url, attempts, f"Request timeout after {timeout:g}s")


class UnsupportedContent(RetrievalExhausted):
    """The response body is not a text document (e.g. an image file)."""

    def __init__(self, url: str, attempts: int, content_type: str):
        self.content_type = content_type
        super().__init__(url, attempts, f"Unsupported content type: {content_type}")
