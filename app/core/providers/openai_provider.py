"""
OpenAI implementation of LLMProvider.

This module provides a vendor-specific implementation for the OpenAI
Chat Completions API while conforming to the LLMProvider interface.
"""
from typing import Optional

from loguru import logger
from openai import AsyncOpenAI

from app.core.providers.llm_provider import LLMProvider, LLMMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """
    OpenAI implementation of LLMProvider.

    Example:
        provider = OpenAIProvider(
            api_key="your-api-key",
            model_name="gpt-4-turbo-preview",
        )
        response = await provider.generate_text(messages)
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gpt-4-turbo-preview",
        timeout: float = 60.0,
    ):
        """
        Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key. May be None; the failure then surfaces
                on the first generation request.
            model_name: Model to use (e.g., "gpt-4-turbo-preview").
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate text completion using OpenAI."""
        openai_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        logger.debug(f"Sending request to OpenAI ({self.model_name})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=openai_messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.debug(f"OpenAI token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
