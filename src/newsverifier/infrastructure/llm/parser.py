"""LLM response parsing and validation."""

import json
import logging
import re

from pydantic import ValidationError

from ...domain.errors import ResultParseError
from ...domain.models import AnalysisResult

logger = logging.getLogger(__name__)

# Greedy: first "{" through last "}", so prose around the object is ignored.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def llm_system_prompt() -> str:
    """Return system prompt with the scoring rubric and the JSON response shape.

    Returns:
        System prompt string for credibility analysis.
    """
    return """作为新闻真实性分析专家，请根据以下维度进行评分和分析：
1. 来源可信度（0-30分）
2. 事实准确性（0-50分）
3. 逻辑一致性（0-20分）
总分为三项之和（0-100分）

请返回严格遵循以下JSON格式：
{
    "scores": { "total": 总分, "source": 来源得分, "fact": 事实得分, "logic": 逻辑得分 },
    "analysis": "整体分析",
    "keyPoints": ["要点1", "要点2", "要点3"],
    "summary": "总结建议"
}"""


def _decode(text: str) -> AnalysisResult:
    """Decode the embedded JSON object in ``text``.

    Raises:
        ResultParseError: If no object is found or it does not fit the schema.
    """
    match = _JSON_OBJECT_RE.search(text)
    if match is None:
        raise ResultParseError("no JSON object in model reply")
    try:
        obj = json.loads(match.group(0))
        return AnalysisResult.model_validate(obj)
    except json.JSONDecodeError as e:
        raise ResultParseError(f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise ResultParseError(f"schema mismatch: {e.error_count()} errors") from e


def parse_result(text: str) -> AnalysisResult:
    """Parse raw LLM output into a validated AnalysisResult.

    Args:
        text: Raw text response from LLM.

    Returns:
        Parsed AnalysisResult, or the zeroed placeholder if parsing fails.
    """
    logger.debug("LLM full_response (truncated 1000 chars): %s", text[:1000])
    try:
        return _decode(text)
    except ResultParseError as e:
        logger.warning("Could not parse model reply: %s", e)
        return AnalysisResult.parse_failure()
