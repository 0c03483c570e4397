"""
Bullet-point summarization of article text.

Summaries are always generated in the base language; translation, when
requested, is a separate step handled by TranslationService.
"""
from loguru import logger

from app.core.exceptions import SummarizationError
from app.core.profiles import BASE_LANGUAGE, LANGUAGES, LengthProfile
from app.core.prompts import SummarizationPrompts
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.models import LLMRole


class SummarizationService:
    """
    Summarizes article text with a single LLM call.

    Every provider failure (auth, quota, timeout, malformed response) is
    reported as one SummarizationError carrying the underlying message.
    """

    def __init__(self, llm_provider: LLMProvider, temperature: float = 0.7):
        """
        Initialize the summarization service.

        Args:
            llm_provider: LLM provider for text generation.
            temperature: Sampling temperature for summaries.
        """
        self.llm_provider = llm_provider
        self.temperature = temperature

    def build_messages(
        self, article_text: str, length_profile: LengthProfile, is_base_language: bool
    ) -> list[LLMMessage]:
        system = LANGUAGES[BASE_LANGUAGE].summarizer_instruction
        if not is_base_language:
            system = f"{system}\n\n{SummarizationPrompts.TRANSLATE_LATER}"

        return [
            LLMMessage(role=LLMRole.SYSTEM, content=system),
            LLMMessage(
                role=LLMRole.USER,
                content=SummarizationPrompts.USER.format(
                    length_instruction=length_profile.instruction,
                    article=article_text,
                ),
            ),
        ]

    async def summarize(
        self,
        article_text: str,
        length_profile: LengthProfile,
        is_base_language: bool = True,
    ) -> str:
        """
        Generate a base-language bullet summary.

        Args:
            article_text: Extracted article body.
            length_profile: Bullet-count directive and token ceiling.
            is_base_language: False when the summary will be translated later.

        Returns:
            The generated summary text, untranslated.

        Raises:
            SummarizationError: On any provider failure or an empty completion.
        """
        messages = self.build_messages(article_text, length_profile, is_base_language)

        logger.info(
            f"Summarizing {len(article_text)} chars "
            f"(length={length_profile.key}, max_tokens={length_profile.max_tokens})"
        )
        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=self.temperature,
                max_tokens=length_profile.max_tokens,
            )
        except Exception as e:
            logger.error(f"Summarization failed: {e!r}")
            raise SummarizationError(str(e) or e.__class__.__name__) from e

        summary = (response.content or "").strip()
        if not summary:
            raise SummarizationError("Language model returned an empty summary")
        return summary
