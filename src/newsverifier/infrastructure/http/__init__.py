"""HTTP client infrastructure."""

from .client import HTTPClientFactory

__all__ = ["HTTPClientFactory"]
