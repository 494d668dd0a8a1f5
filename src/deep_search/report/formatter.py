"""Report rendering for search and deep search results."""

from ..models.fetch import FetchOutcome
from ..models.report import Report
from ..models.search_result import SearchKind, SearchResult
from ..scraper.page_fetcher import truncate

SEPARATOR = "---\n\n"


def format_deep_report(
    query: str,
    search_results: list[SearchResult],
    outcomes: list[FetchOutcome],
    max_content_per_page: int,
    search_type: SearchKind,
) -> Report:
    """Combine search results and their fetch outcomes into one report.

    ``outcomes[i]`` must belong to ``search_results[i]``. Each page's content
    is cut independently at ``max_content_per_page`` characters.

    Args:
        query: Query as the caller gave it
        search_results: Ranked search results
        outcomes: Fetch outcomes aligned with ``search_results``
        max_content_per_page: Character budget per page
        search_type: Kind of search performed

    Returns:
        Report with the rendered text and summary counts
    """
    if len(search_results) != len(outcomes):
        raise ValueError(
            f"{len(search_results)} search results but {len(outcomes)} fetch outcomes"
        )

    successes = sum(1 for outcome in outcomes if outcome.success)
    total_words = sum(outcome.word_count or 0 for outcome in outcomes)

    parts = [
        f'# Deep Search Results for: "{query}"\n\n',
        f"**Search Type:** {search_type.value}\n",
        f"**Results:** {len(search_results)} found, {successes} pages fetched successfully\n",
        f"**Total Content:** ~{total_words:,} words\n\n",
        SEPARATOR,
    ]

    for index, (result, outcome) in enumerate(zip(search_results, outcomes), start=1):
        parts.append(f"## {index}. {result.title}\n")
        parts.append(f"**URL:** {result.link}\n")
        if result.date:
            parts.append(f"**Date:** {result.date}\n")
        parts.append("\n")

        if outcome.success and outcome.content:
            content = truncate(outcome.content, max_content_per_page)
            parts.append(f"### Full Page Content:\n\n{content}\n\n")
        else:
            reason = outcome.error or "no readable content extracted"
            parts.append(f"*Could not fetch content: {reason}*\n\n")
            parts.append(f"**Search Snippet:** {result.snippet}\n\n")

        parts.append(SEPARATOR)

    return Report(
        text="".join(parts),
        result_count=len(search_results),
        successful_fetches=successes,
        total_words=total_words,
    )


def format_simple_report(query: str, search_results: list[SearchResult]) -> str:
    """Render search results as a snippet-only listing."""
    parts = [
        f'# Search Results for: "{query}"\n\n',
        f"**Results:** {len(search_results)} found\n\n",
        SEPARATOR,
    ]

    for result in search_results:
        parts.append(f"## {result.position}. {result.title}\n")
        parts.append(f"**URL:** {result.link}\n")
        parts.append(f"**Snippet:** {result.snippet}\n\n")
        parts.append(SEPARATOR)

    return "".join(parts)
