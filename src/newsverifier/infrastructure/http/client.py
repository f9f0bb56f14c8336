"""HTTP client factory with sensible defaults."""

from typing import Optional

from httpx import AsyncBaseTransport, AsyncClient, Limits, Timeout


class HTTPClientFactory:
    """Factory for creating HTTP clients with consistent configuration."""

    @staticmethod
    def create(
        timeout_seconds: float = 5.0,
        user_agent: Optional[str] = None,
        transport: Optional[AsyncBaseTransport] = None,
    ) -> AsyncClient:
        """Create a new AsyncClient for fetching article pages.

        Args:
            timeout_seconds: Per-operation timeout for connect, read and write.
            user_agent: User-Agent header value. Omitted when None.
            transport: Optional transport override, mainly for tests.

        Returns:
            Configured AsyncClient instance. The caller owns it and must close it.
        """
        headers = {"User-Agent": user_agent} if user_agent else None
        return AsyncClient(
            timeout=Timeout(timeout_seconds),
            limits=Limits(max_keepalive_connections=10, max_connections=50),
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )
