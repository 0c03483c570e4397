"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. The LLM provider is selected based on config.
"""
from functools import lru_cache

from fastapi import Depends

from app.core.config import settings
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.openai_provider import OpenAIProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.gemini_provider import GeminiProvider
from app.models import LLMProviderType
from app.services.extractor import ArticleExtractor
from app.services.summarization import SummarizationService
from app.services.translation import TranslationService
from app.services.orchestrator import SummaryOrchestrator


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_llm_provider() -> LLMProvider:
    """
    Get the LLM provider shared by summarization and translation.

    Default: OpenAI (configured in settings.LLM_PROVIDER)
    """
    provider_type = settings.LLM_PROVIDER

    if provider_type == LLMProviderType.OPENAI:
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL_NAME,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
    elif provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL_NAME,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_article_extractor() -> ArticleExtractor:
    """Get article extractor configured from settings."""
    return ArticleExtractor(
        timeout=settings.FETCH_TIMEOUT_SECONDS,
        user_agent=settings.FETCH_USER_AGENT,
    )


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_llm_provider),
) -> SummarizationService:
    """Get summarization service."""
    return SummarizationService(
        llm_provider=llm_provider,
        temperature=settings.SUMMARY_TEMPERATURE,
    )


def get_translation_service(
    llm_provider: LLMProvider = Depends(get_llm_provider),
) -> TranslationService:
    """Get translation service with a fixed output ceiling."""
    return TranslationService(
        llm_provider=llm_provider,
        max_tokens=settings.TRANSLATION_MAX_TOKENS,
        temperature=settings.TRANSLATION_TEMPERATURE,
    )


def get_orchestrator(
    extractor: ArticleExtractor = Depends(get_article_extractor),
    summarization_service: SummarizationService = Depends(get_summarization_service),
    translation_service: TranslationService = Depends(get_translation_service),
) -> SummaryOrchestrator:
    """
    Get the request orchestrator.

    Wires together:
    - ArticleExtractor for fetching and readability extraction
    - SummarizationService for base-language summaries
    - TranslationService for the optional translation step
    """
    return SummaryOrchestrator(
        extractor=extractor,
        summarization_service=summarization_service,
        translation_service=translation_service,
    )
