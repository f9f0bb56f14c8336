"""News credibility verifier backed by an external language model."""

__version__ = "1.0.0"
