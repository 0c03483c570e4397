"""
Provider abstraction layer for model-agnostic AI integration.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
)
from app.core.providers.openai_provider import OpenAIProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.gemini_provider import GeminiProvider

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMResponse",
    "OpenAIProvider",
    "GroqProvider",
    "GeminiProvider",
]
