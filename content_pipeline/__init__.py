"""
Content Pipeline - markdown articles to an ordered, rendered index.

This package loads a directory of markdown articles with YAML frontmatter,
validates their metadata, renders sanitized HTML bodies and builds a
listing ordered by publication date.

Main entry point is the CLI via `content-pipeline build` command.

Example:
    $ content-pipeline build -i posts/ -o out/
"""

__all__ = [
    "__version__",
    "ArticleIndex",
    "build_index",
    "load_content",
    "parse_article",
    "parse_frontmatter",
    "render_body",
    "run_pipeline",
]
__version__ = "0.1.0"

from .index import ArticleIndex, build_index
from .input import load_content, parse_article, parse_frontmatter
from .output import render_body
from .runner import run_pipeline
