"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_ALLOWED_DOMAINS = "news.cn,xinhuanet.com,people.com.cn"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) NewsVerifierBot/1.0"


class Settings:
    """Application configuration loaded from environment variables.

    Every property reads the environment on access, so secrets rotated in the
    process environment are picked up by the next request.
    """

    def __init__(self) -> None:
        """Load environment variables from .env file."""
        load_dotenv()

    @property
    def deepseek_api_key(self) -> Optional[str]:
        """DeepSeek API bearer credential."""
        return os.getenv("DEEPSEEK_KEY") or os.getenv("DEEPSEEK_API_KEY")

    @property
    def llm_model(self) -> str:
        """LLM model identifier."""
        return os.getenv("LLM_MODEL", "deepseek-chat")

    @property
    def llm_base_url(self) -> str:
        """Base URL of the OpenAI-compatible chat completion API."""
        return os.getenv("LLM_BASE_URL", "https://api.deepseek.com/v1")

    @property
    def llm_temperature(self) -> float:
        """Sampling temperature for credibility analysis."""
        return float(os.getenv("LLM_TEMPERATURE", "0.2"))

    @property
    def fetch_timeout_seconds(self) -> float:
        """Timeout for article page fetches in seconds."""
        return float(os.getenv("FETCH_TIMEOUT_SECONDS", "5.0"))

    @property
    def fetch_user_agent(self) -> str:
        """User-Agent header sent with article page fetches."""
        return os.getenv("FETCH_USER_AGENT", DEFAULT_USER_AGENT)

    @property
    def allowed_domains(self) -> List[str]:
        """Hostname suffixes accepted in URL mode."""
        raw = os.getenv("ALLOWED_DOMAINS", DEFAULT_ALLOWED_DOMAINS)
        return [d.strip() for d in raw.split(",") if d.strip()]

    @property
    def log_level(self) -> str:
        """Root logging level."""
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def port(self) -> int:
        """Port used when serving the API with uvicorn."""
        return int(os.getenv("PORT", "8000"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
