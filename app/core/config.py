"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enums import LLMProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "News Article Summarizer"
    PORT: int = 5000
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    # LLM provider selection
    LLM_PROVIDER: LLMProviderType = LLMProviderType.OPENAI
    LLM_TIMEOUT_SECONDS: float = 60.0

    # OpenAI API
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL_NAME: str = "gpt-4-turbo-preview"

    # Groq API
    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL_NAME: str = "llama-3.3-70b-versatile"

    # Gemini API
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"

    # Generation parameters
    SUMMARY_TEMPERATURE: float = 0.7
    TRANSLATION_TEMPERATURE: float = 0.3
    TRANSLATION_MAX_TOKENS: int = 1000

    # Article fetching
    FETCH_TIMEOUT_SECONDS: float = 15.0
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_4) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
