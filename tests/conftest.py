"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import get_article_extractor, get_llm_provider
from app.core.providers.llm_provider import LLMProvider
from app.models import ExtractedArticle
from app.services.extractor import ArticleExtractor

from tests.utils.samples import BASE_SUMMARY, SAMPLE_ARTICLE, TRANSLATED_SUMMARY, make_response


@pytest.fixture
def mock_llm_provider():
    """LLM provider whose first call summarizes and second call translates."""
    provider = AsyncMock(spec=LLMProvider)
    provider.generate_text.side_effect = [
        make_response(BASE_SUMMARY),
        make_response(TRANSLATED_SUMMARY),
    ]
    return provider


@pytest.fixture
def mock_extractor():
    """Extractor returning a fixed article without touching the network."""
    extractor = AsyncMock(spec=ArticleExtractor)
    extractor.extract.return_value = ExtractedArticle(text=SAMPLE_ARTICLE, title="Transit plan")
    return extractor


@pytest.fixture
def override_dependencies(mock_llm_provider, mock_extractor):
    """Override FastAPI dependencies for testing."""
    app.dependency_overrides[get_llm_provider] = lambda: mock_llm_provider
    app.dependency_overrides[get_article_extractor] = lambda: mock_extractor

    yield

    # Clean up
    app.dependency_overrides.clear()
