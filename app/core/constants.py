"""
Application-wide constants and configuration limits.

Grouped into static classes for namespace management and discoverability.
"""


class ExtractionConfig:
    """Configuration for article fetching and extraction."""
    MAX_ARTICLE_CHARS = 60_000  # ~15k tokens, keeps prompts inside the context window
    BASE_HEADERS = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


class APIMessages:
    """Fixed status messages returned by the liveness endpoints."""
    ROOT = "Backend is running!"
    TEST = "Test successful!"
