"""Fetch a news page and pull out the text most likely to be its article body."""

import asyncio
import logging
import re
from typing import Callable, List, Optional, Tuple, Union

from bs4 import BeautifulSoup
from httpx import AsyncBaseTransport, HTTPError, InvalidURL, Response

from ...domain.errors import FetchError, NoContentError
from ..http.client import HTTPClientFactory

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 500
MAX_EXCERPT_LENGTH = 3000

# Elements whose text is never rendered
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]

_WHITESPACE_RE = re.compile(r"\s+")

Strategy = Callable[[BeautifulSoup], Optional[str]]


def _select_text(selector: str, min_length: int = MIN_CONTENT_LENGTH) -> Strategy:
    """Build a strategy returning the text under ``selector`` if it is long enough."""

    def strategy(soup: BeautifulSoup) -> Optional[str]:
        text = "".join(el.get_text() for el in soup.select(selector))
        return text if len(text) > min_length else None

    strategy.__name__ = f"select({selector})"
    return strategy


def _document_body(min_length: int = MIN_CONTENT_LENGTH) -> Strategy:
    """Build a strategy over the whole body, or the whole document when it has no <body> tag."""

    def strategy(soup: BeautifulSoup) -> Optional[str]:
        root = soup.body or soup
        text = root.get_text()
        return text if len(text) > min_length else None

    strategy.__name__ = "body"
    return strategy


# Most specific first; the document body is the last resort.
CONTENT_SELECTORS: Tuple[str, ...] = (
    "article",
    ".article-content",
    '[itemprop="articleBody"]',
    "main",
)

CONTENT_STRATEGIES: List[Strategy] = [_select_text(s) for s in CONTENT_SELECTORS] + [
    _document_body()
]


def normalize_text(text: str, max_length: int = MAX_EXCERPT_LENGTH) -> str:
    """Collapse whitespace runs, trim, and cut to ``max_length`` characters."""
    return _WHITESPACE_RE.sub(" ", text).strip()[:max_length]


def extract_article_text(
    html: Union[str, bytes],
    strategies: Optional[List[Strategy]] = None,
    max_length: int = MAX_EXCERPT_LENGTH,
    from_encoding: Optional[str] = None,
) -> str:
    """Return the normalized text of the first strategy that finds enough content.

    Args:
        html: Raw HTML document, as text or as undecoded bytes.
        strategies: Ordered extraction strategies. Defaults to CONTENT_STRATEGIES.
        max_length: Maximum excerpt length.
        from_encoding: Charset for ``bytes`` input. When None, the charset is
            detected from the document (``<meta charset>`` and friends).

    Returns:
        Normalized article excerpt.

    Raises:
        NoContentError: If no strategy yields text above the length threshold.
    """
    if isinstance(html, bytes) and from_encoding:
        soup = BeautifulSoup(html, "html.parser", from_encoding=from_encoding)
    else:
        soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(_INVISIBLE_TAGS):
        tag.decompose()

    for strategy in strategies if strategies is not None else CONTENT_STRATEGIES:
        text = strategy(soup)
        if text is not None:
            logger.debug("Article text selected by %s (%d chars)", strategy.__name__, len(text))
            return normalize_text(text, max_length)

    raise NoContentError()


class ArticleExtractor:
    """Fetches article pages and extracts a bounded plain-text excerpt."""

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        user_agent: Optional[str] = None,
        transport: Optional[AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            timeout_seconds: Hard deadline for the whole page fetch, body included.
            user_agent: User-Agent header sent with the fetch.
            transport: Optional httpx transport override.
        """
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._transport = transport

    async def _get(self, url: str) -> Response:
        async with HTTPClientFactory.create(
            self.timeout_seconds, self.user_agent, self._transport
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp

    async def fetch_web_content(self, url: str) -> str:
        """Fetch ``url`` and return its article excerpt.

        Raises:
            FetchError: On invalid URLs, network errors, timeouts and non-2xx responses.
            NoContentError: If the page holds no recognizable article text.
        """
        try:
            resp = await asyncio.wait_for(self._get(url), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.warning("Fetching %s exceeded %.1fs", url, self.timeout_seconds)
            raise FetchError(f"timeout of {self.timeout_seconds:g}s exceeded") from e
        except (HTTPError, InvalidURL) as e:
            logger.warning("Failed to fetch %s: %s", url, e)
            raise FetchError(str(e) or type(e).__name__) from e

        try:
            return extract_article_text(resp.content, from_encoding=resp.charset_encoding)
        except NoContentError:
            logger.warning("No article body recognized at %s", url)
            raise
