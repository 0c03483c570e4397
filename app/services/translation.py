"""
Translation of base-language summaries into the requested output language.
"""
from loguru import logger

from app.core.exceptions import TranslationError
from app.core.profiles import LanguageProfile
from app.core.prompts import TranslationPrompts
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.models import LLMRole


class TranslationService:
    """Translates summaries with a single LLM call per request."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        max_tokens: int = 1000,
        temperature: float = 0.3,
    ):
        self.llm_provider = llm_provider
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def translate(self, summary_text: str, language_profile: LanguageProfile) -> str:
        """
        Translate a summary, or return it unchanged for the base language.

        The base-language case never reaches the provider.

        Raises:
            TranslationError: On any provider failure or an empty completion.
        """
        if language_profile.translation_instruction is None:
            return summary_text

        messages = [
            LLMMessage(role=LLMRole.SYSTEM, content=TranslationPrompts.SYSTEM),
            LLMMessage(
                role=LLMRole.USER,
                content=TranslationPrompts.USER.format(
                    translation_instruction=language_profile.translation_instruction,
                    summary=summary_text,
                ),
            ),
        ]

        logger.info(f"Translating summary to {language_profile.name} ({language_profile.code})")
        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error(f"Translation to {language_profile.code} failed: {e!r}")
            raise TranslationError(str(e) or e.__class__.__name__) from e

        translated = (response.content or "").strip()
        if not translated:
            raise TranslationError("Language model returned an empty translation")
        return translated
