"""Domain layer - Core business entities, models and error kinds."""

from .errors import (
    FetchError,
    ForbiddenDomainError,
    InputValidationError,
    MethodNotAllowedError,
    NoContentError,
    ResultParseError,
    UpstreamAPIError,
    VerifierError,
    error_response,
)
from .models import AnalysisRequest, AnalysisResult, ErrorResult, Scores

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "ErrorResult",
    "Scores",
    "VerifierError",
    "InputValidationError",
    "ForbiddenDomainError",
    "MethodNotAllowedError",
    "FetchError",
    "NoContentError",
    "UpstreamAPIError",
    "ResultParseError",
    "error_response",
]
