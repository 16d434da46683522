"""
Core domain models and business logic.

This package contains data types, errors and helpers that are
independent of any specific pipeline stage.
"""

from .errors import (
    ContentError,
    DuplicateSlugError,
    MalformedFrontmatterError,
    NotFoundError,
    RenderDegradationWarning,
)
from .similarity import SimilarPair, find_similar_titles
from .slug import slugify
from .types import Article, ArticleError, FrontMatter, RawFile, RenderedArticle

__all__ = [
    "Article",
    "ArticleError",
    "FrontMatter",
    "RawFile",
    "RenderedArticle",
    "ContentError",
    "DuplicateSlugError",
    "MalformedFrontmatterError",
    "NotFoundError",
    "RenderDegradationWarning",
    "SimilarPair",
    "find_similar_titles",
    "slugify",
]
