from __future__ import annotations

import re


_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert text to a URL-safe slug.

    Args:
        text: The text to slugify, usually a filename stem

    Returns:
        A lowercase, hyphenated slug, or "untitled" if nothing is left

    Examples:
        >>> slugify("Dynamic Routing")
        'dynamic-routing'
        >>> slugify("2020_03_preview")
        '2020-03-preview'
    """
    slug = _NON_ALNUM_RE.sub("-", text.lower()).strip("-")
    return slug or "untitled"
