"""Credibility analysis service - Core business logic."""

import logging
import re
from typing import Iterable, List, Optional
from urllib.parse import urlparse

import httpx

from ..config.settings import Settings, get_settings
from ..domain.errors import ForbiddenDomainError, InputValidationError
from ..domain.models import AnalysisRequest, AnalysisResult
from ..infrastructure.extraction.extractor import ArticleExtractor
from ..infrastructure.llm.client import LLMClient
from ..infrastructure.llm.parser import llm_system_prompt, parse_result

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

EMPTY_CONTENT_MESSAGE = "内容不能为空"
INVALID_URL_MESSAGE = "无效链接格式"


def is_allowed_domain(url: str, allowed_domains: Iterable[str]) -> bool:
    """Check whether the URL's hostname ends with an allow-listed suffix.

    This is a plain suffix match: ``evilnews.cn`` passes for ``news.cn``.

    Args:
        url: Absolute http(s) URL.
        allowed_domains: Hostname suffixes.

    Returns:
        True if the hostname ends with any suffix. False for unparseable URLs.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return False
    if not hostname:
        return False
    return any(hostname.endswith(d) for d in allowed_domains)


class NewsVerifierService:
    """Service for scoring the credibility of a news text or article URL.

    Validates the request, extracts article text in URL mode, and asks the
    language model for a score.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        extractor: ArticleExtractor,
        allowed_domains: List[str],
        temperature: float = 0.2,
    ) -> None:
        """Initialize the service.

        Args:
            llm_client: Client for LLM interactions.
            extractor: Article page extractor used in URL mode.
            allowed_domains: Hostname suffixes accepted in URL mode.
            temperature: Sampling temperature for the model call.
        """
        self.llm_client = llm_client
        self.extractor = extractor
        self.allowed_domains = list(allowed_domains)
        self.temperature = temperature

    def validate(self, request: AnalysisRequest) -> None:
        """Check the request before any network call.

        Raises:
            InputValidationError: Empty content or a non-http(s) URL.
            ForbiddenDomainError: URL hostname outside the allow-list.
        """
        if not request.content:
            raise InputValidationError(EMPTY_CONTENT_MESSAGE)
        if not request.is_url:
            return
        if not URL_PATTERN.match(request.content):
            raise InputValidationError(INVALID_URL_MESSAGE)
        if not is_allowed_domain(request.content, self.allowed_domains):
            logger.info("Rejected URL outside allow-list: %s", request.content)
            raise ForbiddenDomainError()

    async def resolve_content(self, request: AnalysisRequest) -> str:
        """Return the text to analyze: raw content, or the extracted article."""
        if request.is_url:
            return await self.extractor.fetch_web_content(request.content)
        return request.content

    async def assess(self, text: str) -> AnalysisResult:
        """Ask the model to score ``text`` and parse its reply."""
        messages = [
            {"role": "system", "content": llm_system_prompt()},
            {"role": "user", "content": text},
        ]
        reply = await self.llm_client.chat_completion(
            messages=messages, temperature=self.temperature
        )
        return parse_result(reply)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Run the full analysis for one request.

        Args:
            request: Validated-or-not analysis request.

        Returns:
            Parsed AnalysisResult. A degraded placeholder if the model reply
            could not be parsed.

        Raises:
            InputValidationError, ForbiddenDomainError: Invalid request.
            FetchError, NoContentError: URL mode extraction failed.
            UpstreamAPIError: Model API call failed.
        """
        self.validate(request)
        text = await self.resolve_content(request)
        return await self.assess(text)


def create_verifier_service(
    settings: Optional[Settings] = None,
    llm_http_client: Optional[httpx.AsyncClient] = None,
    fetch_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NewsVerifierService:
    """Create and configure the verifier service with dependency injection.

    The API key is read from settings here, so each call sees the current
    environment.
    """
    if settings is None:
        settings = get_settings()

    llm_client = LLMClient(
        api_key=settings.deepseek_api_key,
        model=settings.llm_model,
        base_url=settings.llm_base_url,
        http_client=llm_http_client,
    )
    extractor = ArticleExtractor(
        timeout_seconds=settings.fetch_timeout_seconds,
        user_agent=settings.fetch_user_agent,
        transport=fetch_transport,
    )
    return NewsVerifierService(
        llm_client=llm_client,
        extractor=extractor,
        allowed_domains=settings.allowed_domains,
        temperature=settings.llm_temperature,
    )
