"""LLM infrastructure implementations."""

from .client import LLMClient
from .parser import llm_system_prompt, parse_result

__all__ = ["LLMClient", "llm_system_prompt", "parse_result"]
