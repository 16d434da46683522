"""
Core data types for the content pipeline.

This module defines the records passed between pipeline stages:
- RawFile: Path and text of one source file, as produced by the loader
- FrontMatter: The decoded metadata block of a file
- Article: A validated, immutable article
- RenderedArticle: Article with its sanitized HTML body
- ArticleError: A file that was rejected, and why
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class RawFile:
    """Represents one content file read from disk.

    Attributes:
        path: Filesystem path of the source file
        text: Full UTF-8 decoded content
    """
    path: Path
    text: str


@dataclass(frozen=True)
class FrontMatter:
    """Decoded frontmatter block.

    The recognized fields are kept as the text that appeared in the file so
    that serializing them again reproduces the same values.

    Attributes:
        title: Article headline
        date: Publication date as ISO-8601 text
        excerpt: Short teaser shown in listings
        extra: All other keys from the block, uninterpreted
    """
    title: str
    date: str
    excerpt: str
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


@dataclass(frozen=True)
class Article:
    """A validated article.

    Attributes:
        slug: URL-safe identifier derived from the filename
        title: Article headline
        excerpt: Short teaser shown in listings
        published_at: Timezone-aware publication timestamp
        body: Raw markdown body
        source_path: File the article was loaded from, if any
        extra: Optional frontmatter keys (author, coverImage, ...)
    """
    slug: str
    title: str
    excerpt: str
    published_at: datetime
    body: str
    source_path: Path | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


@dataclass(frozen=True)
class RenderedArticle:
    """Article with its sanitized HTML body.

    Attributes:
        article: The source Article
        html: Sanitized HTML fragment for the body
        degraded: True when markdown conversion failed and plain text was used
    """
    article: Article
    html: str
    degraded: bool = False


@dataclass(frozen=True)
class ArticleError:
    """A file excluded from the collection.

    Attributes:
        path: The rejected file
        kind: Error class name, e.g. "MalformedFrontmatterError"
        message: Human-readable reason
    """
    path: Path
    kind: str
    message: str
