from __future__ import annotations

from pathlib import Path

import pytest

POSTS_DIR = Path(__file__).resolve().parents[1] / "posts"


def _write_post(
    directory: Path,
    name: str,
    *,
    title: str | None = "Post",
    date: str = "2020-01-01",
    excerpt: str = "Teaser",
    body: str = "Body text.\n",
) -> Path:
    lines = ["---"]
    if title is not None:
        lines.append(f"title: '{title}'")
    lines.append(f"date: '{date}'")
    lines.append(f"excerpt: '{excerpt}'")
    lines.append("---")
    path = directory / name
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
    return path


@pytest.fixture
def posts_dir() -> Path:
    """The sample articles shipped with the repository."""
    return POSTS_DIR


@pytest.fixture
def write_post():
    """Write a markdown article with frontmatter; ``title=None`` omits the title."""
    return _write_post
