"""Input stage: content loading and frontmatter parsing."""

from .frontmatter import (
    parse_article,
    parse_frontmatter,
    parse_iso8601,
    serialize_frontmatter,
    split_frontmatter,
)
from .loader import DEFAULT_EXTENSIONS, list_content_files, load_content

__all__ = [
    "DEFAULT_EXTENSIONS",
    "list_content_files",
    "load_content",
    "parse_article",
    "parse_frontmatter",
    "parse_iso8601",
    "serialize_frontmatter",
    "split_frontmatter",
]
