"""Error kinds raised while handling an analysis request.

Each kind maps to one HTTP status and one body shape through ``ERROR_TABLE``.
Validation kinds short-circuit with a plain ``{"error": ...}`` body; everything
else collapses into an AnalysisResult-shaped 500 body.
"""

import logging
from typing import Any, Callable, Dict, Tuple, Type

from .models import ErrorResult

logger = logging.getLogger(__name__)

FETCH_FAILURE_PREFIX = "网页内容获取失败："


class VerifierError(Exception):
    """Base class for all verifier error kinds."""

    default_message = "服务器内部错误"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowedError(VerifierError):
    """The endpoint only accepts POST."""

    default_message = "仅支持POST请求"


class InputValidationError(VerifierError):
    """Missing content or a malformed URL."""

    default_message = "内容不能为空"


class ForbiddenDomainError(VerifierError):
    """The URL's hostname is not on the allow-list."""

    default_message = "暂不支持该新闻网站"


class FetchError(VerifierError):
    """The article page could not be fetched."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(f"{FETCH_FAILURE_PREFIX}{detail}")


class NoContentError(FetchError):
    """No candidate region of the page held enough text."""

    def __init__(self, detail: str = "无法识别新闻正文内容") -> None:
        super().__init__(detail)


class UpstreamAPIError(VerifierError):
    """The chat completion API call failed or returned a non-success status."""

    default_message = "API请求失败"


class ResultParseError(VerifierError):
    """The model reply held no parseable result. Never surfaced to callers."""

    default_message = "解析分析结果时发生错误"


def _plain(exc: Exception) -> Dict[str, Any]:
    return {"error": str(exc) or VerifierError.default_message}


def _service_failure(exc: Exception) -> Dict[str, Any]:
    return ErrorResult.service_failure(str(exc) or VerifierError.default_message).to_payload()


ERROR_TABLE: Dict[Type[Exception], Tuple[int, Callable[[Exception], Dict[str, Any]]]] = {
    MethodNotAllowedError: (405, _plain),
    InputValidationError: (400, _plain),
    ForbiddenDomainError: (403, _plain),
    FetchError: (500, _service_failure),
    NoContentError: (500, _service_failure),
    UpstreamAPIError: (500, _service_failure),
}


def error_response(exc: Exception) -> Tuple[int, Dict[str, Any]]:
    """Map an exception to its HTTP status code and response body.

    Args:
        exc: Exception raised while handling a request.

    Returns:
        Tuple of (status code, JSON-serializable body). Unknown exception
        types are treated as service failures.
    """
    for kind in type(exc).__mro__:
        if kind in ERROR_TABLE:
            status, build = ERROR_TABLE[kind]
            return status, build(exc)
    logger.debug("Unmapped error kind %s treated as service failure", type(exc).__name__)
    return 500, _service_failure(exc)
