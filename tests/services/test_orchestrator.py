import pytest
from unittest.mock import AsyncMock

from app.core.exceptions import (
    AppException,
    ExtractionError,
    SummarizationError,
    TranslationError,
    ValidationError,
)
from app.core.profiles import get_language_profile, get_length_profile
from app.models import ExtractedArticle, SummarizeRequest
from app.services.extractor import ArticleExtractor
from app.services.orchestrator import SummaryOrchestrator
from app.services.summarization import SummarizationService
from app.services.translation import TranslationService


@pytest.fixture
def extractor():
    mock = AsyncMock(spec=ArticleExtractor)
    mock.extract.return_value = ExtractedArticle(text="Article body")
    return mock


@pytest.fixture
def summarizer():
    mock = AsyncMock(spec=SummarizationService)
    mock.summarize.return_value = "- English point"
    return mock


@pytest.fixture
def translator():
    mock = AsyncMock(spec=TranslationService)
    mock.translate.side_effect = lambda text, profile: (
        text if profile.is_base else f"[{profile.code}] {text}"
    )
    return mock


@pytest.fixture
def orchestrator(extractor, summarizer, translator):
    return SummaryOrchestrator(
        extractor=extractor,
        summarization_service=summarizer,
        translation_service=translator,
    )


def assert_no_calls(extractor, summarizer, translator):
    assert extractor.extract.call_count == 0
    assert summarizer.summarize.call_count == 0
    assert translator.translate.call_count == 0


@pytest.mark.asyncio
async def test_defaults_to_english_medium(orchestrator, extractor, summarizer, translator):
    result = await orchestrator.run(SummarizeRequest(url="https://example.com/a"))

    assert result.summary == "- English point"
    extractor.extract.assert_awaited_once_with("https://example.com/a")
    summarizer.summarize.assert_awaited_once_with(
        "Article body", get_length_profile("medium"), is_base_language=True
    )
    translator.translate.assert_awaited_once_with("- English point", get_language_profile("english"))


@pytest.mark.asyncio
async def test_translated_request(orchestrator, summarizer, translator):
    request = SummarizeRequest(url="https://example.com/a", language="german", summaryLength="short")

    result = await orchestrator.run(request)

    assert result.summary == "[de] - English point"
    _, kwargs = summarizer.summarize.call_args
    assert kwargs["is_base_language"] is False
    translator.translate.assert_awaited_once_with("- English point", get_language_profile("german"))


@pytest.mark.asyncio
@pytest.mark.parametrize("url", [None, "", "   "])
async def test_missing_url(orchestrator, extractor, summarizer, translator, url):
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.run(SummarizeRequest(url=url))

    assert exc_info.value.error == "URL is required"
    assert_no_calls(extractor, summarizer, translator)


@pytest.mark.asyncio
async def test_invalid_language_before_network(orchestrator, extractor, summarizer, translator):
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.run(SummarizeRequest(url="https://example.com/a", language="klingon"))

    assert exc_info.value.error == "Invalid language selected"
    assert_no_calls(extractor, summarizer, translator)


@pytest.mark.asyncio
async def test_invalid_length_before_network(orchestrator, extractor, summarizer, translator):
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.run(SummarizeRequest(url="https://example.com/a", summaryLength="epic"))

    assert exc_info.value.error == "Invalid summary length selected"
    assert_no_calls(extractor, summarizer, translator)


@pytest.mark.asyncio
async def test_extraction_failure_stops_pipeline(orchestrator, extractor, summarizer, translator):
    extractor.extract.side_effect = ExtractionError("No readable article content found")

    with pytest.raises(ExtractionError) as exc_info:
        await orchestrator.run(SummarizeRequest(url="https://example.com/a"))

    assert exc_info.value.status_code == 400
    assert summarizer.summarize.call_count == 0
    assert translator.translate.call_count == 0


@pytest.mark.asyncio
async def test_translation_failure_fails_whole_request(orchestrator, translator):
    translator.translate.side_effect = TranslationError("model overloaded")

    with pytest.raises(TranslationError) as exc_info:
        await orchestrator.run(SummarizeRequest(url="https://example.com/a", language="french"))

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_summarization_failure(orchestrator, translator, summarizer):
    summarizer.summarize.side_effect = SummarizationError("invalid api key")

    with pytest.raises(SummarizationError):
        await orchestrator.run(SummarizeRequest(url="https://example.com/a", language="french"))

    assert translator.translate.call_count == 0


@pytest.mark.asyncio
async def test_unexpected_error_is_wrapped(orchestrator, extractor):
    extractor.extract.side_effect = KeyError("boom")

    with pytest.raises(AppException) as exc_info:
        await orchestrator.run(SummarizeRequest(url="https://example.com/a"))

    assert exc_info.value.status_code == 500
    assert exc_info.value.error == "Failed to generate summary"
    assert "boom" in exc_info.value.details
