"""
Article index: the ordered, slug-addressable collection.

Articles are ordered by publication time, most recent first. Articles with
the same timestamp are ordered by slug so the listing is deterministic no
matter which order the files were processed in.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .core.errors import DuplicateSlugError, NotFoundError
from .core.types import Article


class ArticleIndex:
    """Immutable ordered collection of articles with lookup by slug."""

    def __init__(self, articles: Iterable[Article] = ()):
        by_slug: dict[str, Article] = {}
        for article in articles:
            if article.slug in by_slug:
                raise DuplicateSlugError(article.slug, article.source_path)
            by_slug[article.slug] = article

        # two stable passes: slug ascending, then newest first
        ordered = sorted(by_slug.values(), key=lambda item: item.slug)
        ordered.sort(key=lambda item: item.published_at, reverse=True)

        self._ordered: tuple[Article, ...] = tuple(ordered)
        self._by_slug = by_slug

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._ordered)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __getitem__(self, position: int) -> Article:
        return self._ordered[position]

    def __repr__(self) -> str:
        return f"ArticleIndex({list(self.slugs())!r})"

    def get(self, slug: str) -> Article:
        """Return the article with ``slug``.

        Raises:
            NotFoundError: If no article has that slug
        """
        try:
            return self._by_slug[slug]
        except KeyError:
            raise NotFoundError(f"no article with slug {slug!r}") from None

    def slugs(self) -> list[str]:
        return [article.slug for article in self._ordered]

    def to_records(self) -> list[dict[str, Any]]:
        """JSON-ready listing in index order."""
        return [
            {
                "slug": article.slug,
                "title": article.title,
                "date": article.published_at.isoformat(),
                "excerpt": article.excerpt,
            }
            for article in self._ordered
        ]


def build_index(articles: Iterable[Article]) -> ArticleIndex:
    """Build an ArticleIndex, newest first with ties broken by slug.

    Raises:
        DuplicateSlugError: If two articles share a slug
    """
    return ArticleIndex(articles)
