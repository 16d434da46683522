"""
Error types raised by the content pipeline.

Per-article errors (malformed frontmatter, duplicate slugs) are caught at the
runner boundary and recorded; NotFoundError for the source directory is fatal.
"""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base class for all content pipeline errors."""


class NotFoundError(ContentError):
    """A content directory or an article slug does not exist."""


class MalformedFrontmatterError(ContentError):
    """Frontmatter is missing, undecodable, or lacks a required field."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{path.name}: {message}"
        super().__init__(message)


class DuplicateSlugError(ContentError):
    """Two articles in one collection map to the same slug."""

    def __init__(self, slug: str, path: Path | None = None):
        self.slug = slug
        self.path = path
        message = f"duplicate slug {slug!r}"
        if path is not None:
            message = f"{path.name}: {message}"
        super().__init__(message)


class RenderDegradationWarning(UserWarning):
    """Markdown conversion failed and the body fell back to plain text."""
