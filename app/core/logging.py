"""
Logging configuration using Loguru.

Standard library records from uvicorn, httpx and the LLM SDKs are bridged
into Loguru so every line carries the request id of the request that
produced it.
"""
import logging
import sys
from typing import Any

from loguru import logger

from app.core.config import settings

STDLIB_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "openai", "groq")

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[request_id]} | {name}:{function}:{line} - {message}"
)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forwards stdlib log records to Loguru, keeping their origin."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        def origin(loguru_record: dict[str, Any]) -> None:
            loguru_record.update(
                name=record.name, function=record.funcName, line=record.lineno
            )

        logger.patch(origin).opt(exception=record.exc_info).log(level, record.getMessage())


def _default_request_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("request_id", "N/A")


def setup_logging() -> None:
    """
    Configure Loguru sinks from settings.

    A console sink is always installed. LOG_FILE adds a rotating file sink
    and LOG_JSON switches both sinks to serialized JSON lines.
    """
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.NOTSET)

    for name in STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler()]
        stdlib_logger.propagate = False

    logger.remove()
    logger.configure(patcher=_default_request_id)

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=settings.LOG_LEVEL,
        serialize=settings.LOG_JSON,
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=LOG_FORMAT,
            level=settings.LOG_LEVEL,
            serialize=settings.LOG_JSON,
            rotation="10 MB",
            retention="30 days",
            enqueue=True,
        )
