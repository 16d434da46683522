"""
Main pipeline orchestration for the content pipeline.

This module coordinates the workflow:
1. Load raw files from the content directory
2. Parse frontmatter into Articles
3. Render article bodies to sanitized HTML
4. Build the ordered index
5. Report near-duplicate titles

Each file is processed independently. A file that fails to parse is logged
and recorded in ``PipelineResult.errors``; only a missing content directory
stops the run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from .config import AppConfig
from .core.errors import DuplicateSlugError, MalformedFrontmatterError
from .core.similarity import SimilarPair, find_similar_titles
from .core.types import ArticleError, RawFile, RenderedArticle
from .index import ArticleIndex, build_index
from .input.frontmatter import parse_article
from .input.loader import load_content
from .output.renderer import render_article
from .utils.logging import LOGGER_NAME, log_event


@dataclass
class PipelineResult:
    """Everything produced by one pipeline run.

    Attributes:
        index: Accepted articles, newest first
        rendered: Rendered bodies keyed by slug
        errors: Files excluded from the index
        similar: Article pairs with near-identical titles
    """
    index: ArticleIndex
    rendered: dict[str, RenderedArticle] = field(default_factory=dict)
    errors: list[ArticleError] = field(default_factory=list)
    similar: list[SimilarPair] = field(default_factory=list)

    @property
    def degraded(self) -> list[str]:
        return [slug for slug in self.index.slugs() if self.rendered[slug].degraded]


def run_pipeline(
    content_dir: Path,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
) -> PipelineResult:
    """Run load, parse, render and index over a content directory.

    Args:
        content_dir: Directory holding one markdown file per article
        cfg: Application configuration
        logger: Logger for pipeline events (defaults to the package logger)

    Returns:
        PipelineResult with the index, rendered bodies and per-file errors

    Raises:
        NotFoundError: If the content directory does not exist
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        content_dir=str(content_dir),
        workers=cfg.pipeline.workers,
    )

    raw_files = load_content(content_dir, cfg.content.extensions, logger)
    process = partial(_process_file, extensions=cfg.render.markdown_extensions, logger=logger)

    if cfg.pipeline.workers > 1:
        with ThreadPoolExecutor(max_workers=cfg.pipeline.workers) as pool:
            outcomes = list(pool.map(process, raw_files))
    else:
        outcomes = [process(raw) for raw in raw_files]

    rendered: dict[str, RenderedArticle] = {}
    errors: list[ArticleError] = []
    for outcome in outcomes:
        if isinstance(outcome, ArticleError):
            errors.append(outcome)
            continue
        slug = outcome.article.slug
        if slug in rendered:
            path = outcome.article.source_path or Path(slug)
            exc = DuplicateSlugError(slug, path)
            errors.append(_reject(path, exc, logger))
            continue
        rendered[slug] = outcome

    index = build_index(item.article for item in rendered.values())

    similar: list[SimilarPair] = []
    if cfg.dedup.report_similar:
        similar = find_similar_titles(index, cfg.dedup.threshold)
        for pair in similar:
            log_event(
                logger,
                f"Similar titles: {pair.first} / {pair.second}",
                level=logging.WARNING,
                event="similar_titles",
                first=pair.first,
                second=pair.second,
                score=round(pair.score, 1),
            )

    log_event(
        logger,
        f"Pipeline done: {len(index)} article(s), {len(errors)} rejected",
        event="pipeline_done",
        accepted=len(index),
        rejected=len(errors),
    )
    return PipelineResult(index=index, rendered=rendered, errors=errors, similar=similar)


def _process_file(
    raw: RawFile,
    extensions: list[str],
    logger: logging.Logger | None,
) -> RenderedArticle | ArticleError:
    try:
        article = parse_article(raw)
    except MalformedFrontmatterError as exc:
        return _reject(raw.path, exc, logger)

    log_event(
        logger,
        f"Loaded {article.slug}",
        level=logging.DEBUG,
        event="article_loaded",
        slug=article.slug,
        path=str(raw.path),
    )
    return render_article(article, extensions, logger)


def _reject(path: Path, exc: Exception, logger: logging.Logger | None) -> ArticleError:
    error = ArticleError(path=path, kind=type(exc).__name__, message=str(exc))
    log_event(
        logger,
        f"Rejected {path.name}: {exc}",
        level=logging.WARNING,
        event="article_rejected",
        path=str(path),
        kind=error.kind,
    )
    return error
