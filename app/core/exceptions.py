"""
Custom exception classes and JSON error handling.

Every failure leaves the API as ``{"error": ..., "details": ...}`` where
``details`` is only present when there is an underlying cause to report.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict


GENERATION_FAILED = "Failed to generate summary"


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""
    error: str
    details: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error: str,
        details: Optional[str] = None,
    ):
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(details or error)


class ValidationError(AppException):
    """Caller supplied a missing or unknown parameter."""

    def __init__(self, error: str):
        super().__init__(status_code=400, error=error)


class ExtractionError(AppException):
    """The article could not be fetched or no readable body was found."""

    def __init__(self, details: str, error: str = "Could not extract article content"):
        super().__init__(status_code=400, error=error, details=details)


class SummarizationError(AppException):
    """The language model failed to produce a summary."""

    def __init__(self, details: str):
        super().__init__(status_code=500, error=GENERATION_FAILED, details=details)


class TranslationError(AppException):
    """The language model failed to translate the summary."""

    def __init__(self, details: str):
        super().__init__(status_code=500, error=GENERATION_FAILED, details=details)


def create_error_response(
    status_code: int,
    error: str,
    details: Optional[str] = None,
) -> JSONResponse:
    """Create a JSON error response, omitting empty details."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return its JSON error body."""
    return create_error_response(
        status_code=exc.status_code,
        error=exc.error,
        details=exc.details,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a caller problem, reported as 400."""
    logger.warning(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    return create_error_response(
        status_code=400,
        error="Invalid request body",
        details=str(exc.errors()),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so nothing escapes the HTTP boundary."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return create_error_response(
        status_code=500,
        error="Something went wrong!",
        details=str(exc),
    )
