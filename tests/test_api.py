"""
Tests for the HTTP endpoint: status codes, bodies and CORS headers.
"""

import pytest
from fastapi.testclient import TestClient

from newsverifier.domain.errors import FetchError, NoContentError, UpstreamAPIError
from newsverifier.interfaces.api.app import create_app, get_service_factory
from newsverifier.application.verifier import NewsVerifierService

from .conftest import ALLOWED, SAMPLE_RESULT, FakeExtractor, FakeLLMClient

URL = "/api/analyze"

ZERO_SCORES = {"total": 0, "source": 0, "fact": 0, "logic": 0}


def _client(service: NewsVerifierService) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_service_factory] = lambda: (lambda: service)
    return TestClient(app)


def _service(llm=None, extractor=None) -> NewsVerifierService:
    return NewsVerifierService(
        llm_client=llm or FakeLLMClient(),
        extractor=extractor or FakeExtractor(),
        allowed_domains=ALLOWED,
    )


def _assert_cors(resp) -> None:
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Methods"] == "POST"


@pytest.fixture
def client(service) -> TestClient:
    return _client(service)


class TestMethods:
    """Test method handling."""

    def test_options_preflight(self, client):
        resp = client.options(URL)

        assert resp.status_code == 200
        assert resp.content == b""
        _assert_cors(resp)

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
    def test_non_post_rejected(self, client, method):
        resp = client.request(method, URL)

        assert resp.status_code == 405
        assert resp.json() == {"error": "仅支持POST请求"}
        _assert_cors(resp)

    def test_healthz(self, client):
        assert client.get("/healthz").json() == {"status": "ok"}


class TestValidation:
    """Test 400 and 403 short-circuits."""

    def test_missing_content(self, client, fake_llm):
        resp = client.post(URL, json={"isURL": False})

        assert resp.status_code == 400
        assert resp.json() == {"error": "内容不能为空"}
        _assert_cors(resp)
        assert fake_llm.calls == []

    def test_empty_content(self, client):
        resp = client.post(URL, json={"content": ""})

        assert resp.status_code == 400

    def test_non_json_body(self, client):
        resp = client.post(URL, content=b"not json", headers={"Content-Type": "text/plain"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "内容不能为空"}

    def test_malformed_url(self, client, fake_extractor):
        resp = client.post(URL, json={"content": "ftp://x.com", "isURL": True})

        assert resp.status_code == 400
        assert resp.json() == {"error": "无效链接格式"}
        assert fake_extractor.urls == []

    def test_forbidden_domain(self, client, fake_llm, fake_extractor):
        resp = client.post(URL, json={"content": "https://evil.com/a", "isURL": True})

        assert resp.status_code == 403
        assert resp.json() == {"error": "暂不支持该新闻网站"}
        _assert_cors(resp)
        assert fake_extractor.urls == []
        assert fake_llm.calls == []


class TestAnalysis:
    """Test successful and degraded analyses."""

    def test_text_success(self, client, fake_extractor):
        resp = client.post(URL, json={"content": "某地发生地震"})

        assert resp.status_code == 200
        assert resp.json() == SAMPLE_RESULT
        assert '"scores":{"total":78,"source":25,"fact":38,"logic":15}' in resp.text
        _assert_cors(resp)
        assert fake_extractor.urls == []

    def test_url_success(self, client, fake_extractor):
        resp = client.post(URL, json={"content": "https://news.cn/a", "isURL": True})

        assert resp.status_code == 200
        assert resp.json() == SAMPLE_RESULT
        assert fake_extractor.urls == ["https://news.cn/a"]

    def test_parse_failure_is_200_placeholder(self):
        client = _client(_service(llm=FakeLLMClient(reply="no json here")))

        resp = client.post(URL, json={"content": "text"})

        assert resp.status_code == 200
        assert resp.json() == {
            "scores": ZERO_SCORES,
            "analysis": "解析分析结果时发生错误",
            "keyPoints": [],
            "summary": "请尝试重新提交分析",
        }


class TestServiceFailures:
    """Test that failures collapse into an AnalysisResult-shaped 500."""

    @pytest.mark.parametrize(
        "llm, extractor, message",
        [
            (FakeLLMClient(error=UpstreamAPIError("Insufficient Balance")), None, "Insufficient Balance"),
            (FakeLLMClient(error=UpstreamAPIError()), None, "API请求失败"),
            (None, FakeExtractor(error=FetchError("timeout")), "网页内容获取失败：timeout"),
            (None, FakeExtractor(error=NoContentError()), "网页内容获取失败：无法识别新闻正文内容"),
            (FakeLLMClient(error=RuntimeError("boom")), None, "boom"),
        ],
    )
    def test_failure_body(self, llm, extractor, message):
        client = _client(_service(llm=llm, extractor=extractor))

        resp = client.post(URL, json={"content": "https://news.cn/a", "isURL": True})

        assert resp.status_code == 500
        assert resp.json() == {
            "error": message,
            "scores": ZERO_SCORES,
            "analysis": "分析服务暂时不可用",
            "keyPoints": [],
            "summary": "请稍后重试",
        }
        _assert_cors(resp)


class TestConfigurationFailures:
    """Test that a broken configuration still yields the normal 500 shape."""

    def test_bad_setting_is_service_failure(self, monkeypatch):
        monkeypatch.setenv("LLM_TEMPERATURE", "hot")
        client = TestClient(create_app())

        resp = client.post(URL, json={"content": "某地发生地震"})

        assert resp.status_code == 500
        body = resp.json()
        assert body["scores"] == ZERO_SCORES
        assert body["analysis"] == "分析服务暂时不可用"
        assert "hot" in body["error"]
        _assert_cors(resp)
