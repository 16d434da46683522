"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- ContentConfig: Source directory and accepted file extensions
- RenderConfig: Markdown conversion settings
- DedupConfig: Near-duplicate title reporting
- PipelineConfig: Worker count for per-file processing
- OutputConfig: Site output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class ContentConfig:
    """Configuration for the content loader.

    Attributes:
        directory: Directory holding one markdown file per article
        extensions: File suffixes treated as articles
    """

    directory: str = "posts"
    extensions: list[str] = field(default_factory=lambda: [".md", ".markdown"])


@dataclass
class RenderConfig:
    """Configuration for markdown rendering.

    Attributes:
        markdown_extensions: Python-Markdown extension names
    """

    markdown_extensions: list[str] = field(default_factory=lambda: ["extra", "sane_lists"])


@dataclass
class DedupConfig:
    """Configuration for near-duplicate reporting.

    Attributes:
        report_similar: Whether to log articles with near-identical titles
        threshold: Fuzzy match threshold (0-100) for title similarity
    """

    report_similar: bool = True
    threshold: int = 92


@dataclass
class PipelineConfig:
    """Configuration for pipeline execution.

    Attributes:
        workers: Number of threads for per-file processing (1 runs inline)
    """

    workers: int = 1


@dataclass
class OutputConfig:
    """Configuration for site output.

    Attributes:
        title: Title shown on the generated index page
        pages: Whether to write HTML pages in addition to index.json
        index_filename: Name of the JSON listing
    """

    title: str = "Blog"
    pages: bool = True
    index_filename: str = "index.json"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    content: ContentConfig = field(default_factory=ContentConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "content": {
            "directory": cfg.content.directory,
            "extensions": list(cfg.content.extensions),
        },
        "render": {
            "markdown_extensions": list(cfg.render.markdown_extensions),
        },
        "dedup": {
            "report_similar": cfg.dedup.report_similar,
            "threshold": cfg.dedup.threshold,
        },
        "pipeline": {
            "workers": cfg.pipeline.workers,
        },
        "output": {
            "title": cfg.output.title,
            "pages": cfg.output.pages,
            "index_filename": cfg.output.index_filename,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        content=ContentConfig(**data["content"]),
        render=RenderConfig(**data["render"]),
        dedup=DedupConfig(**data["dedup"]),
        pipeline=PipelineConfig(**data["pipeline"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
