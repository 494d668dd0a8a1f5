"""Pipeline output models."""

from pydantic import BaseModel


class Report(BaseModel):
    """Formatted report text plus its summary counts."""

    text: str
    result_count: int
    successful_fetches: int
    total_words: int


class ToolResponse(BaseModel):
    """What an invocation hands back to the caller layer."""

    text: str
    is_error: bool = False
