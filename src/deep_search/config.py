"""Configuration settings for Deep Search."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Search provider credentials (process defaults, overridable per call)
    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DEEP_SEARCH_GOOGLE_API_KEY", "GOOGLE_API_KEY"),
        description="Google Custom Search API key",
    )
    google_cx: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DEEP_SEARCH_GOOGLE_CX", "GOOGLE_CX"),
        description="Google Custom Search Engine ID",
    )

    # Search provider
    search_endpoint: str = Field(
        default="https://customsearch.googleapis.com/customsearch/v1",
        description="Custom Search JSON API endpoint",
    )
    search_timeout_seconds: float = Field(default=30.0, description="Provider request timeout")

    # Page retrieval
    fetch_timeout_seconds: float = Field(default=15.0, description="Timeout per fetch attempt")
    fetch_max_attempts: int = Field(default=3, description="Attempts per URL")
    fetch_backoff_base_seconds: float = Field(default=1.0, description="Base backoff delay")
    fetch_max_content_length: int = Field(default=100000, description="Extracted text ceiling")
    fetch_concurrency: int = Field(default=5, description="URLs fetched concurrently per chunk")

    # Report defaults
    default_max_content_per_page: int = Field(default=50000, description="Deep search page budget")
    default_news_max_content_per_page: int = Field(default=30000, description="News page budget")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    model_config = {
        "env_prefix": "DEEP_SEARCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
