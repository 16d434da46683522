"""
Site output: JSON listing plus optional HTML pages.

Writes ``index.json`` in index order and, when pages are enabled, an
``index.html`` listing and one ``<slug>.html`` per article rendered through
the bundled Jinja2 templates.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import OutputConfig
from .renderer import template_environment

if TYPE_CHECKING:
    from ..runner import PipelineResult


def write_site(result: PipelineResult, output_dir: Path, cfg: OutputConfig) -> Path:
    """Write the build output for a pipeline run.

    Args:
        result: Output of ``run_pipeline``
        output_dir: Directory to write into (created if missing)
        cfg: Output settings

    Returns:
        Path to the JSON listing
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    index_path = output_dir / cfg.index_filename
    records = result.index.to_records()
    index_path.write_text(f"{json.dumps(records, ensure_ascii=False, indent=2)}\n", encoding="utf-8")

    if cfg.pages:
        _write_pages(result, output_dir, cfg)

    return index_path


def _write_pages(result: PipelineResult, output_dir: Path, cfg: OutputConfig) -> None:
    env = template_environment()
    article_template = env.get_template("article.html")
    for article in result.index:
        rendered = result.rendered[article.slug]
        html = article_template.render(
            site_title=cfg.title,
            article=article,
            body=rendered.html,
            degraded=rendered.degraded,
        )
        (output_dir / f"{article.slug}.html").write_text(html, encoding="utf-8")

    listing = env.get_template("index.html").render(
        site_title=cfg.title,
        articles=list(result.index),
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        total=len(result.index),
    )
    (output_dir / "index.html").write_text(listing, encoding="utf-8")
