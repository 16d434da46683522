"""Output stage: markdown rendering, sanitization and site writing."""

from .renderer import render_article, render_body, render_plain_text
from .sanitize import sanitize_html
from .site import write_site

__all__ = [
    "render_article",
    "render_body",
    "render_plain_text",
    "sanitize_html",
    "write_site",
]
