"""
Frontmatter parsing for markdown articles.

A content file starts with a YAML block between two ``---`` marker lines,
followed by the markdown body:

    ---
    title: 'Dynamic Routing and Static Generation'
    date: '2020-03-16T05:35:07.322Z'
    excerpt: 'Short teaser text.'
    ---
    Body text...

The recognized keys are ``title``, ``date`` and ``excerpt``; all three are
required. Other keys are preserved in ``FrontMatter.extra``.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import MalformedFrontmatterError
from ..core.slug import slugify
from ..core.types import Article, FrontMatter, RawFile

MARKER = "---"
REQUIRED_FIELDS = ("title", "date", "excerpt")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a timezone-aware datetime.

    Date-only values resolve to midnight UTC; naive timestamps are taken as UTC.

    Raises:
        ValueError: If the value is not ISO 8601
    """
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def split_frontmatter(text: str, path: Path | None = None) -> tuple[str, str]:
    """Split raw file text into the metadata block and the body.

    Raises:
        MalformedFrontmatterError: If either marker line is missing
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != MARKER:
        raise MalformedFrontmatterError("missing opening '---' marker", path)

    for idx in range(1, len(lines)):
        if lines[idx].rstrip() == MARKER:
            return "".join(lines[1:idx]), "".join(lines[idx + 1 :])

    raise MalformedFrontmatterError("missing closing '---' marker", path)


def parse_frontmatter(text: str, path: Path | None = None) -> tuple[FrontMatter, str]:
    """Parse raw file text into a FrontMatter record and the markdown body.

    Args:
        text: Full file content
        path: Source path, used only in error messages

    Returns:
        Tuple of (FrontMatter, body)

    Raises:
        MalformedFrontmatterError: If the markers are missing, the block is not
            a YAML mapping, or a required field is missing or invalid
    """
    block, body = split_frontmatter(text, path)

    try:
        data = yaml.safe_load(block)
    # invalid unquoted timestamps surface as ValueError, deep nesting as RecursionError
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        raise MalformedFrontmatterError(f"invalid YAML: {exc}", path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError("frontmatter must be a key/value mapping", path)
    for key in data:
        if not isinstance(key, str):
            raise MalformedFrontmatterError(f"non-string key {key!r}", path)

    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise MalformedFrontmatterError(f"missing required field(s): {', '.join(missing)}", path)

    title = _require_text(data, "title", path)
    if not title.strip():
        raise MalformedFrontmatterError("title must not be blank", path)
    excerpt = _require_text(data, "excerpt", path)
    date_text = _date_text(data["date"], path)

    extra = {key: value for key, value in data.items() if key not in REQUIRED_FIELDS}
    return FrontMatter(title=title, date=date_text, excerpt=excerpt, extra=extra), body


def serialize_frontmatter(front: FrontMatter, body: str) -> str:
    """Write a FrontMatter record and body back into file text."""
    data: dict[str, Any] = {
        "title": front.title,
        "date": front.date,
        "excerpt": front.excerpt,
    }
    data.update(front.extra)
    block = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"{MARKER}\n{block}{MARKER}\n{body}"


def parse_article(raw: RawFile) -> Article:
    """Build an Article from a raw file.

    The slug comes from the filename stem; the frontmatter supplies the rest.

    Raises:
        MalformedFrontmatterError: If the frontmatter is invalid
    """
    front, body = parse_frontmatter(raw.text, raw.path)
    return Article(
        slug=slugify(raw.path.stem),
        title=front.title,
        excerpt=front.excerpt,
        published_at=parse_iso8601(front.date),
        body=body,
        source_path=raw.path,
        extra=dict(front.extra),
    )


def _require_text(data: dict[str, Any], key: str, path: Path | None) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise MalformedFrontmatterError(f"{key} must be a string, got {type(value).__name__}", path)
    return value


def _date_text(value: Any, path: Path | None) -> str:
    # YAML turns unquoted dates into date/datetime objects
    if isinstance(value, date):
        text = value.isoformat()
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise MalformedFrontmatterError(f"date must be ISO 8601, got {value!r}", path)

    try:
        parse_iso8601(text)
    except ValueError as exc:
        raise MalformedFrontmatterError(f"unparseable date {text!r}", path) from exc
    return text
