"""Article text extraction."""

from .extractor import ArticleExtractor, CONTENT_STRATEGIES, extract_article_text

__all__ = ["ArticleExtractor", "CONTENT_STRATEGIES", "extract_article_text"]
