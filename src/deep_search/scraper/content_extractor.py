"""Article text extraction from raw HTML."""

import re

from bs4 import BeautifulSoup
from readability import Document
import structlog

logger = structlog.get_logger()

_WHITESPACE_RUN = re.compile(r"\s+")
_EXCESS_BLANK_LINES = re.compile(r"\n\s*\n\s*\n")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and 3+ newlines to two."""
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _EXCESS_BLANK_LINES.sub("\n\n", text)
    return text.strip()


class ContentExtractor:
    """Extracts readable article text and titles from HTML pages.

    Extraction is a two-stage strategy: a readability pass over the whole
    document, then a selector-based pass over a cleaned DOM when the first
    stage fails or yields no text.
    """

    NOISE_SELECTORS = (
        "script, style, nav, footer, header, aside, noscript, svg, iframe, form, "
        ".ads, .advertisement, .sidebar, .comments, .social-share"
    )

    CONTENT_SELECTORS = [
        "article",
        "main",
        '[role="main"]',
        ".post-content",
        ".article-content",
        ".entry-content",
        ".content",
        "#content",
        ".post",
        ".blog-post",
    ]

    def extract(self, html: str, url: str) -> str:
        """Extract the main text of a page.

        Args:
            html: Raw HTML body
            url: Source URL, used to resolve relative links

        Returns:
            Normalized plain text, possibly empty
        """
        text = self.extract_primary(html, url)
        if text:
            return text

        logger.debug("extraction_fallback", url=url)
        return self.extract_fallback(html)

    def extract_primary(self, html: str, url: str) -> str:
        """Run readability over the document.

        Returns an empty string when readability cannot parse the document.
        """
        try:
            summary = Document(html, url=url).summary(html_partial=True)
        except Exception as e:
            # readability raises Unparseable as well as raw lxml parser errors
            logger.debug("readability_failed", url=url, error=str(e))
            return ""

        return normalize_whitespace(BeautifulSoup(summary, "lxml").get_text(" "))

    def extract_fallback(self, html: str) -> str:
        """Extract text from the first non-empty known content container.

        Falls back to the whole body text when no container matches.
        """
        soup = BeautifulSoup(html, "lxml")

        for element in soup.select(self.NOISE_SELECTORS):
            element.decompose()

        for selector in self.CONTENT_SELECTORS:
            elements = soup.select(selector)
            text = " ".join(element.get_text(" ") for element in elements)
            if text.strip():
                return normalize_whitespace(text)

        body = soup.body
        if body is None:
            return ""
        return normalize_whitespace(body.get_text(" "))

    def extract_title(self, html: str) -> str:
        """Extract a page title.

        Prefers ``<title>``, then ``og:title``, then ``<meta name="title">``.
        """
        soup = BeautifulSoup(html, "lxml")

        if soup.title is not None:
            title = soup.title.get_text(strip=True)
            if title:
                return title

        for attrs in ({"property": "og:title"}, {"name": "title"}):
            meta = soup.find("meta", attrs=attrs)
            if meta is not None and meta.get("content"):
                return meta["content"].strip()

        return ""
