"""Application layer - request handling use cases."""

from .verifier import NewsVerifierService, create_verifier_service, is_allowed_domain

__all__ = ["NewsVerifierService", "create_verifier_service", "is_allowed_domain"]
