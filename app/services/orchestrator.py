"""
Request orchestration for article summarization.

A request moves linearly through validate -> extract -> summarize ->
translate -> respond. Any failure ends it in the FAILED stage and is raised
as an AppException so the API layer can render one JSON error shape.
"""
from loguru import logger

from app.core.exceptions import AppException, GENERATION_FAILED, ValidationError
from app.core.profiles import get_language_profile, get_length_profile
from app.models import PipelineStage, SummarizeRequest, SummarizeResponse
from app.services.extractor import ArticleExtractor
from app.services.summarization import SummarizationService
from app.services.translation import TranslationService


class SummaryOrchestrator:
    """
    Sequences extraction, summarization and translation for one request.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        extractor: ArticleExtractor,
        summarization_service: SummarizationService,
        translation_service: TranslationService,
    ):
        self.extractor = extractor
        self.summarization_service = summarization_service
        self.translation_service = translation_service

    async def run(self, request: SummarizeRequest) -> SummarizeResponse:
        """
        Produce a summary for the requested article.

        Raises:
            AppException: ValidationError / ExtractionError (400) or
                SummarizationError / TranslationError (500). Unexpected
                errors are wrapped as a 500 "Failed to generate summary".
        """
        stage = PipelineStage.RECEIVED
        try:
            url = request.url.strip() if isinstance(request.url, str) else request.url
            if not url:
                raise ValidationError("URL is required")
            language = get_language_profile(request.language)
            length = get_length_profile(request.summary_length)
            stage = self._advance(PipelineStage.VALIDATED)

            article = await self.extractor.extract(url)
            stage = self._advance(PipelineStage.EXTRACTED)

            summary = await self.summarization_service.summarize(
                article.text, length, is_base_language=language.is_base
            )
            stage = self._advance(PipelineStage.SUMMARIZED)

            summary = await self.translation_service.translate(summary, language)
            stage = self._advance(PipelineStage.TRANSLATED)
        except AppException as e:
            logger.warning(f"Request failed after {stage.value}: {e.error} ({e.details})")
            self._advance(PipelineStage.FAILED)
            raise
        except Exception as e:
            logger.opt(exception=e).error(f"Unexpected failure after {stage.value}")
            self._advance(PipelineStage.FAILED)
            raise AppException(
                status_code=500, error=GENERATION_FAILED, details=str(e)
            ) from e

        self._advance(PipelineStage.RESPONDED)
        return SummarizeResponse(summary=summary)

    @staticmethod
    def _advance(stage: PipelineStage) -> PipelineStage:
        logger.debug(f"Pipeline stage: {stage.value}")
        return stage
