from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from rapidfuzz import fuzz, utils

from .types import Article


@dataclass(frozen=True)
class SimilarPair:
    """Two articles whose titles score at or above the report threshold."""

    first: str
    second: str
    score: float


def find_similar_titles(articles: Iterable[Article], threshold: int = 92) -> list[SimilarPair]:
    """Report article pairs with near-identical titles.

    Articles are never merged or dropped here; the caller only logs the pairs.
    """
    seen: list[Article] = []
    pairs: list[SimilarPair] = []

    for article in sorted(articles, key=lambda item: item.slug):
        for existing in seen:
            score = fuzz.token_sort_ratio(
                existing.title, article.title, processor=utils.default_process
            )
            if score >= threshold:
                pairs.append(SimilarPair(first=existing.slug, second=article.slug, score=score))
        seen.append(article)

    return pairs
