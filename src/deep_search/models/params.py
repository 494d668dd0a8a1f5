"""Validated invocation parameters."""

from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator

from .search_result import SearchKind


def parse_domains(value: Any) -> list[str]:
    """Parse a domain filter given as a comma-separated string or a list.

    Items are trimmed and empty items dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(domain).strip() for domain in value if str(domain).strip()]


class Credentials(BaseModel):
    """Search provider credentials: API key plus search engine (scope) ID."""

    api_key: SecretStr | None = None
    cx: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.api_key and self.api_key.get_secret_value() and self.cx)


class SearchParameters(BaseModel):
    """Parameters of a single deep search invocation."""

    query: str = Field(..., min_length=1, description="Search query")
    num_results: int = Field(default=10, ge=1, le=10, description="Results to fetch")
    search_type: SearchKind = Field(default=SearchKind.WEB)
    include_domains: list[str] = Field(default_factory=list)
    exclude_domains: list[str] = Field(default_factory=list)
    max_content_per_page: int = Field(default=50000, ge=5000, le=100000)
    credentials: Credentials | None = Field(
        default=None, description="Per-call credentials; process defaults apply when absent"
    )

    @field_validator("include_domains", "exclude_domains", mode="before")
    @classmethod
    def _split_domains(cls, value: Any) -> list[str]:
        return parse_domains(value)
