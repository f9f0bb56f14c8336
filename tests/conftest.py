"""Shared fixtures for the test suite."""

import json
from typing import Any, Dict, List, Optional

import pytest

from newsverifier.application.verifier import NewsVerifierService

ALLOWED = ["news.cn", "xinhuanet.com", "people.com.cn"]

SAMPLE_RESULT: Dict[str, Any] = {
    "scores": {"total": 78, "source": 25, "fact": 38, "logic": 15},
    "analysis": "报道引用了官方来源，事实陈述基本可查证。",
    "keyPoints": ["来源为官方媒体", "数据与公开统计一致", "个别表述存在夸大"],
    "summary": "整体可信，建议核对具体数据。",
}


def article_html(text: str, wrapper: str = "article") -> str:
    """Minimal page holding ``text`` inside ``wrapper``."""
    return f"<html><head><title>t</title></head><body><{wrapper}>{text}</{wrapper}></body></html>"


class FakeLLMClient:
    """Records chat completion calls and replies with a canned string."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply or json.dumps(SAMPLE_RESULT, ensure_ascii=False)
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def chat_completion(self, messages, **kwargs) -> str:
        self.calls.append({"messages": messages, **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply


class FakeExtractor:
    """Stands in for ArticleExtractor and records the URLs it was asked for."""

    def __init__(self, text: str = "", error: Optional[Exception] = None) -> None:
        self.text = text or "新华社消息 " * 60
        self.error = error
        self.urls: List[str] = []

    async def fetch_web_content(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    return FakeExtractor()


@pytest.fixture
def service(fake_llm, fake_extractor) -> NewsVerifierService:
    return NewsVerifierService(
        llm_client=fake_llm,
        extractor=fake_extractor,
        allowed_domains=ALLOWED,
    )
