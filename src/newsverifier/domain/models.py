"""Core domain models for the credibility analysis."""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PARSE_FAILURE_ANALYSIS = "解析分析结果时发生错误"
PARSE_FAILURE_SUMMARY = "请尝试重新提交分析"
SERVICE_FAILURE_ANALYSIS = "分析服务暂时不可用"
SERVICE_FAILURE_SUMMARY = "请稍后重试"


class AnalysisRequest(BaseModel):
    """A single analysis request: free text, or a URL when is_url is set."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = ""
    is_url: bool = Field(default=False, alias="isURL")

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v: Any) -> str:
        """Treat missing or non-string content as empty."""
        return v if isinstance(v, str) else ""

    @field_validator("is_url", mode="before")
    @classmethod
    def coerce_is_url(cls, v: Any) -> bool:
        """Accept any truthy value as URL mode."""
        return bool(v)


class Scores(BaseModel):
    """Credibility scores on the three rubric dimensions plus their total."""

    total: Union[int, float] = 0
    source: Union[int, float] = 0
    fact: Union[int, float] = 0
    logic: Union[int, float] = 0


class AnalysisResult(BaseModel):
    """Structured credibility assessment returned to callers."""

    model_config = ConfigDict(populate_by_name=True)

    scores: Scores
    analysis: str = ""
    key_points: List[str] = Field(default_factory=list, alias="keyPoints")
    summary: str = ""

    @classmethod
    def parse_failure(cls) -> "AnalysisResult":
        """Placeholder returned when the model reply cannot be parsed."""
        return cls(
            scores=Scores(),
            analysis=PARSE_FAILURE_ANALYSIS,
            key_points=[],
            summary=PARSE_FAILURE_SUMMARY,
        )

    def to_payload(self) -> dict:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(by_alias=True)


class ErrorResult(AnalysisResult):
    """AnalysisResult-shaped body for service failures, carrying the error message."""

    error: str

    @classmethod
    def service_failure(cls, message: str) -> "ErrorResult":
        """Zeroed result surfacing the given error message."""
        return cls(
            error=message,
            scores=Scores(),
            analysis=SERVICE_FAILURE_ANALYSIS,
            key_points=[],
            summary=SERVICE_FAILURE_SUMMARY,
        )
