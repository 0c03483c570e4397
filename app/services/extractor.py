"""
Article content extraction.

Fetches a page with httpx, strips structural boilerplate with BeautifulSoup
and isolates the article body with the readability heuristic
(readability-lxml), returning plain text.
"""
import asyncio
import re
from typing import Any, Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from loguru import logger
from readability import Document

from app.core.constants import ExtractionConfig
from app.core.exceptions import ExtractionError
from app.models import ExtractedArticle


# Tags that never carry article content
NON_CONTENT_TAGS = [
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "aside",
    "iframe",
    "form",
    "svg",
]

# Class/id tokens marking ads, comments, share widgets and related-article blocks
NON_CONTENT_MARKERS = re.compile(
    r"(?:^|[-_\s])(?:ads?|advert\w*|sponsor\w*|comments?|disqus|share|sharing|social"
    r"|related|recommended|promo\w*|newsletter|cookie\w*|subscribe)(?:[-_\s]|$)",
    re.IGNORECASE,
)

CONTAINER_TAGS = {"html", "body", "main", "article"}

BLOCK_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "pre"]

# Generic wrappers; their loose text counts as a block of its own
WRAPPER_TAGS = ["body", "div", "section", "td", "th", "dd", "blockquote"]

TEXT_TAGS = BLOCK_TAGS + WRAPPER_TAGS


def is_absolute_http_url(url: Any) -> bool:
    if not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def strip_non_content(soup: BeautifulSoup) -> None:
    """Remove the fixed denylist of non-content regions in place."""
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    flagged = []
    for element in soup.find_all(True):
        # Page-level containers often carry marker classes like "comments-open"
        if element.name in CONTAINER_TAGS:
            continue
        classes = element.get("class") or []
        marker = " ".join(classes) + " " + (element.get("id") or "")
        if NON_CONTENT_MARKERS.search(marker):
            flagged.append(element)

    for element in flagged:
        # Children of an already removed region are gone with it
        if not element.decomposed:
            element.decompose()


def _loose_text(element: Tag) -> str:
    """Text of an element outside its nested text-bearing descendants."""
    parts = []
    for child in element.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif isinstance(child, Tag) and child.name not in TEXT_TAGS and not child.find(TEXT_TAGS):
            parts.append(child.get_text(" "))
    return " ".join(" ".join(parts).split())


def html_to_text(html: str) -> str:
    """Render readability output as plain text, one block per paragraph."""
    soup = BeautifulSoup(html, "lxml")
    blocks = []
    for element in soup.find_all(TEXT_TAGS):
        if element.find(TEXT_TAGS):
            # Nested blocks are emitted by their innermost ancestor
            text = _loose_text(element)
        else:
            text = " ".join(element.get_text(" ", strip=True).split())
        if text:
            blocks.append(text)
    if not blocks:
        return " ".join(soup.get_text(" ", strip=True).split())
    return "\n\n".join(blocks)


def parse_article(html: str) -> tuple[Optional[str], str]:
    """
    Extract (title, text) from a raw HTML document.

    Returns an empty text when no article body could be identified.
    """
    soup = BeautifulSoup(html, "lxml")
    strip_non_content(soup)

    doc = Document(str(soup))
    title = doc.short_title() or None
    body_html = doc.summary(html_partial=True)
    return title, html_to_text(body_html).strip()


class ArticleExtractor:
    """
    Fetches an article URL and returns its readable text.

    Exactly one HTTP request is made per call; there are no retries.
    """

    def __init__(
        self,
        timeout: float = 15.0,
        user_agent: Optional[str] = None,
        max_chars: int = ExtractionConfig.MAX_ARTICLE_CHARS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            timeout: Fetch timeout in seconds.
            user_agent: User-Agent header sent with the request.
            max_chars: Article text longer than this is truncated.
            transport: Optional httpx transport (used by tests).
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.max_chars = max_chars
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = dict(ExtractionConfig.BASE_HEADERS)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return httpx.AsyncClient(
            follow_redirects=True,
            timeout=self.timeout,
            headers=headers,
            transport=self.transport,
        )

    async def fetch(self, url: str) -> str:
        """Download the raw document, raising ExtractionError on any failure."""
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Fetch of {url} returned status {e.response.status_code}")
            raise ExtractionError(
                f"Failed to fetch {url}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Fetch of {url} failed: {e!r}")
            raise ExtractionError(f"Failed to fetch {url}: {e}") from e

        logger.info(f"Fetched {len(response.content)} bytes from {response.url}")
        return response.text

    async def extract(self, url: str) -> ExtractedArticle:
        """
        Fetch a URL and isolate the main article text.

        Args:
            url: Absolute http(s) URL of the article.

        Returns:
            ExtractedArticle with non-empty, trimmed text.

        Raises:
            ExtractionError: If the URL is malformed, the fetch fails or
                no readable article body is found.
        """
        if not is_absolute_http_url(url):
            raise ExtractionError(f"Not an absolute http(s) URL: {url}")

        html = await self.fetch(url)

        try:
            # Parsing is CPU bound; keep it off the event loop
            title, text = await asyncio.to_thread(parse_article, html)
        except Exception as e:
            logger.warning(f"Readability failed on {url}: {e!r}")
            raise ExtractionError(f"Failed to parse article at {url}: {e}") from e

        if not text:
            raise ExtractionError(f"No readable article content found at {url}")

        if len(text) > self.max_chars:
            logger.info(f"Truncating article from {len(text)} to {self.max_chars} chars")
            text = text[: self.max_chars] + "... (truncated)"

        logger.info(f"Extracted {len(text)} chars from {url} (title: {title!r})")
        return ExtractedArticle(text=text, title=title)
