"""
Pydantic models for API request/response schemas.
"""
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.core.profiles import BASE_LANGUAGE, DEFAULT_LENGTH


class SummarizeRequest(BaseModel):
    """Request model for article summarization.

    Fields are deliberately loose; the orchestrator validates them so that
    each problem maps to its own error message.
    """

    url: Optional[Any] = None
    language: Optional[Any] = BASE_LANGUAGE
    summary_length: Optional[Any] = Field(
        default=DEFAULT_LENGTH,
        validation_alias=AliasChoices("summaryLength", "length", "summary_length"),
    )

    model_config = ConfigDict(extra="ignore")


class SummarizeResponse(BaseModel):
    """Successful summarization result."""

    summary: str

    model_config = ConfigDict(frozen=True)


class MessageResponse(BaseModel):
    """Plain status message."""

    message: str


class LanguageOption(BaseModel):
    """Public view of a supported output language."""

    key: str
    name: str
    code: str


class LengthOption(BaseModel):
    """Public view of a supported summary length tier."""

    key: str
    instruction: str
    max_tokens: int
