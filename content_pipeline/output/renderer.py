"""
Markdown rendering for article bodies.

Bodies are converted with Python-Markdown and then sanitized. If conversion
fails, a RenderDegradationWarning is emitted and the body is rendered as
escaped plain-text paragraphs instead, so one bad article never stops a build.
"""

from __future__ import annotations

import logging
import re
import warnings
from pathlib import Path
from typing import Iterable

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.errors import RenderDegradationWarning
from ..core.types import Article, RenderedArticle
from ..utils.logging import log_event
from .sanitize import sanitize_html

DEFAULT_MARKDOWN_EXTENSIONS = ("extra", "sane_lists")
TEMPLATES_DIR = Path(__file__).parent / "templates"

_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def template_environment() -> Environment:
    """Jinja2 environment for the bundled templates, with HTML autoescaping."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


def render_body(
    body: str,
    extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    logger: logging.Logger | None = None,
    slug: str | None = None,
) -> tuple[str, bool]:
    """Render a markdown body into a sanitized HTML fragment.

    Args:
        body: Markdown text
        extensions: Python-Markdown extension names
        logger: Logger for degradation events
        slug: Article slug, included in the degradation event

    Returns:
        Tuple of (html, degraded). ``degraded`` is True when markdown
        conversion failed and the plain-text rendering was used.
    """
    try:
        converted = _convert(body, list(extensions))
    except Exception as exc:  # noqa: BLE001
        warnings.warn(
            f"markdown conversion failed, falling back to plain text: {exc}",
            RenderDegradationWarning,
            stacklevel=2,
        )
        log_event(
            logger,
            "Render degraded to plain text",
            level=logging.WARNING,
            event="render_degraded",
            slug=slug,
            error=str(exc),
        )
        return render_plain_text(body), True
    return sanitize_html(converted), False


def render_article(
    article: Article,
    extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    logger: logging.Logger | None = None,
) -> RenderedArticle:
    """Render an Article's body and pair it with the article."""
    html, degraded = render_body(article.body, extensions, logger, slug=article.slug)
    return RenderedArticle(article=article, html=html, degraded=degraded)


def render_plain_text(body: str) -> str:
    """Render text as escaped paragraphs split on blank lines."""
    paragraphs = [part.strip() for part in _BLANK_LINES_RE.split(body.strip()) if part.strip()]
    template = template_environment().get_template("plain.html")
    return template.render(paragraphs=paragraphs)


def _convert(body: str, extensions: list[str]) -> str:
    return markdown.markdown(body, extensions=extensions, output_format="html")
