"""
Google Gemini implementation of LLMProvider.

This module provides a vendor-specific implementation for the Gemini API
while conforming to the LLMProvider interface.
"""
from typing import Optional

import google.generativeai as genai
from loguru import logger

from app.core.providers.llm_provider import LLMProvider, LLMMessage, LLMResponse
from app.models.enums import LLMRole


class GeminiProvider(LLMProvider):
    """
    Google Gemini implementation of LLMProvider.

    Uses the google-generativeai SDK for async text generation.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gemini-2.5-flash",
        timeout: float = 60.0,
    ):
        """
        Initialize the Gemini provider.

        Args:
            api_key: Google AI API key.
            model_name: Gemini model to use (e.g., "gemini-2.5-flash").
            timeout: Per-request timeout in seconds.
        """
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._model: Optional[genai.GenerativeModel] = None

    @property
    def model(self) -> genai.GenerativeModel:
        if self._model is None:
            if not self.api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate text completion using Gemini.

        Gemini uses a single prompt format, so messages are converted
        to a structured text prompt.
        """
        prompt = self._format_messages(messages)

        config = genai.GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        logger.debug(f"Sending request to Gemini ({self.model_name})")
        response = await self.model.generate_content_async(
            prompt,
            generation_config=config,
            request_options={"timeout": self.timeout},
        )

        usage = None
        if response.usage_metadata:
            usage = {
                "prompt_tokens": response.usage_metadata.prompt_token_count,
                "completion_tokens": response.usage_metadata.candidates_token_count,
                "total_tokens": response.usage_metadata.total_token_count,
            }
            logger.debug(f"Gemini token usage: {usage}")

        return LLMResponse(
            content=response.text,
            model=self.model_name,
            usage=usage,
        )

    def _format_messages(self, messages: list[LLMMessage]) -> str:
        """
        Convert universal messages to Gemini prompt format.

        Since Gemini prefers a single prompt, we format messages
        with role labels for context.
        """
        parts = []
        for msg in messages:
            if msg.role == LLMRole.SYSTEM:
                parts.append(f"System Instructions: {msg.content}\n\n")
            elif msg.role == LLMRole.USER:
                parts.append(f"User: {msg.content}\n")
            elif msg.role == LLMRole.ASSISTANT:
                parts.append(f"Assistant: {msg.content}\n")
        return "".join(parts)
