"""Tests for page retrieval with retry and backoff."""

import asyncio

import httpx
import pytest

from conftest import ARTICLE_PARAGRAPH, RecordingSleep, page_fetcher_for
from deep_search.errors import (
    ClientHttpError,
    FetchTimeout,
    RetrievalExhausted,
    UnsupportedContent,
)
from deep_search.scraper.page_fetcher import TRUNCATION_MARKER, is_text_content, truncate

URL = "https://example.com/article"


class CountingHandler:
    """Answers requests from a list of responses or exceptions, repeating the last."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.answers[min(len(self.requests), len(self.answers)) - 1]
        if isinstance(answer, type) and issubclass(answer, Exception):
            raise answer("simulated", request=request)
        return answer


def test_server_error_is_retried_three_times_with_backoff():
    handler = CountingHandler(httpx.Response(500))
    sleep = RecordingSleep()
    fetcher = page_fetcher_for(handler, sleep=sleep)

    with pytest.raises(RetrievalExhausted) as exc_info:
        asyncio.run(fetcher.fetch_raw(URL))

    assert len(handler.requests) == 3
    assert sleep.delays == [1.0, 2.0]
    assert str(exc_info.value) == "HTTP 500"
    assert exc_info.value.attempts == 3


def test_server_error_yields_failure_outcome():
    fetcher = page_fetcher_for(CountingHandler(httpx.Response(503)))

    outcome = asyncio.run(fetcher.fetch_page(URL))

    assert outcome.success is False
    assert outcome.url == URL
    assert outcome.error == "HTTP 503"
    assert outcome.content == ""


def test_not_found_is_not_retried():
    handler = CountingHandler(httpx.Response(404))
    sleep = RecordingSleep()
    fetcher = page_fetcher_for(handler, sleep=sleep)

    with pytest.raises(ClientHttpError) as exc_info:
        asyncio.run(fetcher.fetch_raw(URL))

    assert len(handler.requests) == 1
    assert sleep.delays == []
    assert exc_info.value.status_code == 404

    outcome = asyncio.run(page_fetcher_for(CountingHandler(httpx.Response(404))).fetch_page(URL))
    assert outcome.success is False
    assert outcome.error == "HTTP 404"


def test_rate_limited_response_is_retried():
    handler = CountingHandler(httpx.Response(429), httpx.Response(200, text="<p>ok</p>"))
    sleep = RecordingSleep()
    fetcher = page_fetcher_for(handler, sleep=sleep)

    body = asyncio.run(fetcher.fetch_raw(URL))

    assert body == "<p>ok</p>"
    assert len(handler.requests) == 2
    assert sleep.delays == [1.0]


def test_network_error_is_retried():
    handler = CountingHandler(httpx.ConnectError, httpx.Response(200, text="hello"))
    fetcher = page_fetcher_for(handler)

    assert asyncio.run(fetcher.fetch_raw(URL)) == "hello"
    assert len(handler.requests) == 2


def test_timeout_is_terminal():
    handler = CountingHandler(httpx.ReadTimeout)
    sleep = RecordingSleep()
    fetcher = page_fetcher_for(handler, sleep=sleep)

    with pytest.raises(FetchTimeout):
        asyncio.run(fetcher.fetch_raw(URL))

    assert len(handler.requests) == 1
    assert sleep.delays == []


def test_slow_response_times_out_without_retry():
    calls = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        await asyncio.sleep(1)
        return httpx.Response(200, text="late")

    fetcher = page_fetcher_for(handler, timeout=0.05)
    outcome = asyncio.run(fetcher.fetch_page(URL))

    assert outcome.success is False
    assert "timeout" in outcome.error.lower()
    assert len(calls) == 1


def test_browser_headers_are_sent():
    handler = CountingHandler(httpx.Response(200, text="ok"))

    asyncio.run(page_fetcher_for(handler).fetch_raw(URL))

    headers = handler.requests[0].headers
    assert headers["user-agent"].startswith("Mozilla/5.0")
    assert "text/html" in headers["accept"]
    assert headers["accept-language"].startswith("en-US")


def test_fetch_page_extracts_title_and_content(article_html):
    fetcher = page_fetcher_for(CountingHandler(httpx.Response(200, text=article_html)))

    outcome = asyncio.run(fetcher.fetch_page(URL))

    assert outcome.success is True
    assert outcome.title == "Why Rust"
    assert "ownership model guarantees memory safety" in outcome.content
    assert outcome.word_count == len(outcome.content.split())


def test_fetch_page_caps_content_after_counting_words(article_html):
    fetcher = page_fetcher_for(
        CountingHandler(httpx.Response(200, text=article_html)),
        max_content_length=100,
    )

    outcome = asyncio.run(fetcher.fetch_page(URL))

    assert outcome.content.endswith(TRUNCATION_MARKER)
    assert len(outcome.content) == 100 + len(TRUNCATION_MARKER)
    assert outcome.word_count > len(outcome.content.split())
    assert outcome.word_count >= 4 * len(ARTICLE_PARAGRAPH.split())


def test_truncate():
    assert truncate("abcdef", 6) == "abcdef"
    assert truncate("abcdefg", 6) == "abcdef" + TRUNCATION_MARKER
    assert truncate("", 6) == ""


def test_binary_body_is_not_treated_as_a_page():
    png = b"\x89PNG\r\n\x1a\n" + b"\x00\xff" * 6000
    handler = CountingHandler(
        httpx.Response(200, content=png, headers={"content-type": "image/png"})
    )
    sleep = RecordingSleep()
    fetcher = page_fetcher_for(handler, sleep=sleep)

    with pytest.raises(UnsupportedContent):
        asyncio.run(fetcher.fetch_raw(URL))
    assert len(handler.requests) == 1
    assert sleep.delays == []

    outcome = asyncio.run(fetcher.fetch_page(URL))
    assert outcome.success is False
    assert outcome.content == ""
    assert outcome.error == "Unsupported content type: image/png"


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("text/html; charset=utf-8", True),
        ("TEXT/PLAIN", True),
        ("application/xhtml+xml", True),
        ("", True),
        ("image/png", False),
        ("application/pdf", False),
        ("application/octet-stream", False),
    ],
)
def test_is_text_content(content_type, expected):
    assert is_text_content(content_type) is expected
