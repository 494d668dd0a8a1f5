"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError


def test_search_parameters_defaults():
    """Test SearchParameters with only a query."""
    from deep_search.models import SearchKind, SearchParameters

    params = SearchParameters(query="rust")

    assert params.num_results == 10
    assert params.search_type == SearchKind.WEB
    assert params.max_content_per_page == 50000
    assert params.include_domains == []
    assert params.credentials is None


def test_search_parameters_parses_comma_separated_domains():
    from deep_search.models import SearchParameters

    params = SearchParameters(
        query="rust",
        include_domains=" a.com, b.com ,,",
        exclude_domains=["c.com", "  "],
    )

    assert params.include_domains == ["a.com", "b.com"]
    assert params.exclude_domains == ["c.com"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"query": ""},
        {"num_results": 0},
        {"num_results": 11},
        {"max_content_per_page": 4999},
        {"max_content_per_page": 100001},
        {"search_type": "video"},
    ],
)
def test_search_parameters_rejects_out_of_range_values(overrides):
    from deep_search.models import SearchParameters

    with pytest.raises(ValidationError):
        SearchParameters(**{"query": "rust", **overrides})


def test_search_result_is_immutable():
    from deep_search.models import SearchResult

    result = SearchResult(title="t", link="https://a.com", position=1)

    with pytest.raises(ValidationError):
        result.position = 2


def test_fetch_outcome_failure_shape():
    from deep_search.models import FetchOutcome

    outcome = FetchOutcome.failure("https://a.com", "HTTP 404")

    assert outcome.success is False
    assert outcome.error == "HTTP 404"
    assert outcome.content == ""
    assert outcome.title == ""
    assert outcome.word_count is None


def test_credentials_hide_api_key():
    from deep_search.models import Credentials

    credentials = Credentials(api_key="secret-key", cx="engine")

    assert "secret-key" not in repr(credentials)
    assert credentials.is_complete
    assert not Credentials(cx="engine").is_complete
