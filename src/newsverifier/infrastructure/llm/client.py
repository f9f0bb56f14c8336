"""LLM client infrastructure."""

import logging
from typing import Any, Optional

import httpx
from openai import APIStatusError, AsyncOpenAI, OpenAIError

from ...domain.errors import UpstreamAPIError

logger = logging.getLogger(__name__)


def _provider_message(error: APIStatusError) -> Optional[str]:
    """Pull ``error.message`` out of a provider error body, if there is one."""
    body: Any = error.body
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return str(nested["message"])
        if body.get("message"):
            return str(body["message"])
    return None


class LLMClient:
    """Client for interacting with LLM APIs (OpenAI-compatible)."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://api.deepseek.com/v1",
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize LLM client.

        Args:
            api_key: API key for the LLM service.
            model: Model identifier.
            base_url: Base URL for the API. Defaults to DeepSeek API.
            http_client: Optional httpx client handed to the SDK.
        """
        self.model = model
        self.api_key = api_key
        self.base_url = base_url
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise UpstreamAPIError("缺少API密钥配置")
            self._client = AsyncOpenAI(
                base_url=self.base_url,
                api_key=self.api_key,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    async def chat_completion(
        self, messages: list[dict[str, str]], **kwargs
    ) -> str:
        """Generate chat completion from LLM.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            **kwargs: Additional arguments to pass to the API.

        Returns:
            Response content string.

        Raises:
            UpstreamAPIError: If the API call fails or returns a non-success status.
        """
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=messages,
                **kwargs,
            )
        except APIStatusError as e:
            logger.warning("LLM API returned status %s", e.status_code)
            raise UpstreamAPIError(_provider_message(e) or "") from e
        except OpenAIError as e:
            logger.warning("LLM API call failed: %s", e)
            raise UpstreamAPIError(str(e)) from e

        if not completion.choices:
            raise UpstreamAPIError()
        return completion.choices[0].message.content or ""
