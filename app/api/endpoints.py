"""
API endpoints for article summarization.
"""
import time
from typing import List, Optional

from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_orchestrator
from app.core.constants import APIMessages
from app.core.profiles import LANGUAGES, LENGTHS
from app.models import (
    LanguageOption,
    LengthOption,
    MessageResponse,
    SummarizeRequest,
    SummarizeResponse,
)
from app.services.orchestrator import SummaryOrchestrator


router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def root():
    """Liveness marker."""
    return MessageResponse(message=APIMessages.ROOT)


@router.post("/test", response_model=MessageResponse)
async def smoke_test():
    """Smoke-test echo; the request body is ignored."""
    return MessageResponse(message=APIMessages.TEST)


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_article(
    payload: Optional[SummarizeRequest] = None,
    orchestrator: SummaryOrchestrator = Depends(get_orchestrator),
):
    """
    Summarizes a news article and optionally translates the summary.

    Args:
        payload: URL plus optional language and summaryLength keys.
        orchestrator: Sequences extraction, summarization and translation.

    Returns:
        SummarizeResponse: A JSON object containing the summary text.
    """
    if payload is None:
        payload = SummarizeRequest()
    logger.info(
        f"Incoming request for URL: {payload.url} "
        f"(language={payload.language}, length={payload.summary_length})"
    )

    start_time = time.perf_counter()
    result = await orchestrator.run(payload)
    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")
    return result


@router.get("/languages", response_model=List[LanguageOption])
async def list_languages():
    """Supported output languages, base language first."""
    return [
        LanguageOption(key=p.key, name=p.name, code=p.code)
        for p in LANGUAGES.values()
    ]


@router.get("/lengths", response_model=List[LengthOption])
async def list_lengths():
    """Supported summary length tiers, shortest first."""
    return [
        LengthOption(key=p.key, instruction=p.instruction, max_tokens=p.max_tokens)
        for p in LENGTHS.values()
    ]
