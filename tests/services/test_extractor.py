import httpx
import pytest
from bs4 import BeautifulSoup

from app.core.exceptions import ExtractionError
from app.services.extractor import (
    ArticleExtractor,
    html_to_text,
    is_absolute_http_url,
    strip_non_content,
)


PARAGRAPHS = [
    "Scientists announced on Monday that a new species of deep-sea coral had been found off the "
    "coast of Portugal, surviving at depths previously thought too cold for reef-building life.",
    "The discovery was made during a six-week expedition that used remotely operated vehicles to "
    "survey underwater canyons, collecting samples and high-resolution images of the colonies.",
    "Researchers said the find could reshape how marine protected areas are drawn, because the "
    "coral appears to shelter dozens of fish species that depend on it during spawning season.",
]

ARTICLE_HTML = f"""
<html>
  <head><title>New coral species found | Ocean News</title><script>var x = 1;</script></head>
  <body class="single-post comments-open">
    <header><nav><a href="/">Home</a><a href="/world">World</a></nav></header>
    <article>
      <h1>New coral species found</h1>
      <p>{PARAGRAPHS[0]}</p>
      <div class="ad-slot">Buy discounted scuba gear today</div>
      <p>{PARAGRAPHS[1]}</p>
      <div class="share-buttons">Share on social media</div>
      <p>{PARAGRAPHS[2]}</p>
    </article>
    <div id="comments"><p>First comment! Great reporting, loved every word of it.</p></div>
    <aside class="related-articles">Read also: whales return to the bay</aside>
    <footer>Copyright Ocean News</footer>
  </body>
</html>
"""


def transport_returning(status_code: int, html: str, calls: list):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(status_code, text=html, headers={"content-type": "text/html"})

    return httpx.MockTransport(handler)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/news/1", True),
        ("http://example.com", True),
        ("not-a-url", False),
        ("example.com/article", False),
        ("ftp://example.com/file", False),
        ("https://", False),
        (123, False),
        (None, False),
    ],
)
def test_is_absolute_http_url(url, expected):
    assert is_absolute_http_url(url) is expected


def test_strip_non_content_removes_denylisted_regions():
    soup = BeautifulSoup(ARTICLE_HTML, "lxml")

    strip_non_content(soup)
    text = soup.get_text(" ", strip=True)

    assert "var x" not in text
    assert "Home" not in text
    assert "scuba gear" not in text
    assert "Share on social" not in text
    assert "First comment" not in text
    assert "whales return" not in text
    assert "Copyright" not in text
    assert "deep-sea coral" in text
    # body carries "comments-open" but must survive
    assert soup.body is not None


def test_html_to_text_keeps_paragraph_breaks():
    text = html_to_text("<div><h2>Title</h2><p>One  two</p><ul><li>Three</li></ul></div>")
    assert text == "Title\n\nOne two\n\nThree"


def test_html_to_text_keeps_bare_wrapper_text():
    html = (
        "<div><p>Lead paragraph.</p>"
        "<div>The council approved the <b>transit plan</b> on Monday.</div>"
        "<table><tr><td>Budget: 2.1 billion</td></tr></table></div>"
    )

    text = html_to_text(html)

    assert text == "Lead paragraph.\n\nThe council approved the transit plan on Monday.\n\nBudget: 2.1 billion"


def test_html_to_text_keeps_loose_text_beside_blocks():
    text = html_to_text("<div>Opening line <!-- ad slot --><p>Second paragraph.</p></div>")
    assert text == "Opening line\n\nSecond paragraph."


@pytest.mark.asyncio
async def test_extract_article_text():
    calls = []
    extractor = ArticleExtractor(transport=transport_returning(200, ARTICLE_HTML, calls))

    article = await extractor.extract("https://news.example.com/coral")

    assert len(calls) == 1
    assert "deep-sea coral" in article.text
    assert "remotely operated vehicles" in article.text
    assert "scuba gear" not in article.text
    assert "First comment" not in article.text
    assert article.text == article.text.strip()


@pytest.mark.asyncio
async def test_malformed_url_fails_without_fetch():
    calls = []
    extractor = ArticleExtractor(transport=transport_returning(200, ARTICLE_HTML, calls))

    with pytest.raises(ExtractionError) as exc_info:
        await extractor.extract("not-a-url")

    assert exc_info.value.status_code == 400
    assert calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 403, 500])
async def test_non_2xx_status_is_extraction_failure(status):
    calls = []
    extractor = ArticleExtractor(transport=transport_returning(status, ARTICLE_HTML, calls))

    with pytest.raises(ExtractionError) as exc_info:
        await extractor.extract("https://news.example.com/missing")

    assert str(status) in exc_info.value.details
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_network_error_is_extraction_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    extractor = ArticleExtractor(transport=httpx.MockTransport(handler))

    with pytest.raises(ExtractionError):
        await extractor.extract("https://unreachable.example.com/")


@pytest.mark.asyncio
async def test_page_without_article_body_fails():
    html = "<html><body><nav>Home</nav><footer>Contact</footer></body></html>"
    extractor = ArticleExtractor(transport=transport_returning(200, html, []))

    with pytest.raises(ExtractionError):
        await extractor.extract("https://news.example.com/empty")


@pytest.mark.asyncio
async def test_long_article_is_truncated():
    extractor = ArticleExtractor(
        max_chars=100, transport=transport_returning(200, ARTICLE_HTML, [])
    )

    article = await extractor.extract("https://news.example.com/coral")

    assert article.text.endswith("... (truncated)")
    assert len(article.text) == 100 + len("... (truncated)")
