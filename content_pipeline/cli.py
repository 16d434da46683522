"""
Command-line interface for the content pipeline.

Uses Typer to provide ``build``, ``list`` and ``show`` commands over a
directory of markdown articles.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import AppConfig, load_config
from .core.errors import ContentError, NotFoundError
from .output.site import write_site
from .runner import PipelineResult, run_pipeline
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(
    config: Path | None,
    content_dir: Path | None,
    log_level: str | None,
    workers: int | None = None,
) -> tuple[AppConfig, Path]:
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if workers is not None:
        cfg.pipeline.workers = workers
    return cfg, content_dir or Path(cfg.content.directory)


def _run(cfg: AppConfig, content_dir: Path, log_dir: Path | None = None) -> PipelineResult:
    logger = setup_logging(cfg.logging, log_dir)
    try:
        return run_pipeline(content_dir, cfg, logger)
    except NotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _print_errors(result: PipelineResult) -> None:
    if not result.errors:
        return
    table = Table(title="Rejected files")
    table.add_column("File")
    table.add_column("Error")
    table.add_column("Reason")
    for error in result.errors:
        table.add_row(escape(error.path.name), error.kind, escape(error.message))
    console.print(table)


@app.command()
def build(
    input: Path | None = typer.Option(None, "--input", "-i", help="Content directory."),
    output: Path = typer.Option(Path("out"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Worker threads."),
    pages: bool | None = typer.Option(None, "--pages/--no-pages", help="Write HTML pages."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Build the article index and pages.

    Loads every article in the content directory, renders the bodies,
    and writes index.json (plus HTML pages) to the output directory.
    Files with malformed frontmatter are reported and skipped.
    """
    cfg, content_dir = _prepare(config, input, log_level, workers)
    if pages is not None:
        cfg.output.pages = pages
    if log_file is not None:
        cfg.logging.file = log_file

    result = _run(cfg, content_dir, log_dir=output)
    index_path = write_site(result, output, cfg.output)

    _print_errors(result)
    console.print(f"Built {len(result.index)} article(s): {index_path}")


@app.command("list")
def list_articles(
    input: Path | None = typer.Option(None, "--input", "-i", help="Content directory."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option("WARNING", "--log-level", help="Logging level."),
):
    """List articles, most recent first."""
    cfg, content_dir = _prepare(config, input, log_level)
    result = _run(cfg, content_dir)

    table = Table()
    table.add_column("Slug", style="bold")
    table.add_column("Date")
    table.add_column("Title")
    for article in result.index:
        table.add_row(article.slug, article.published_at.date().isoformat(), escape(article.title))
    console.print(table)
    _print_errors(result)


@app.command()
def show(
    slug: str = typer.Argument(..., help="Article slug."),
    input: Path | None = typer.Option(None, "--input", "-i", help="Content directory."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    raw: bool = typer.Option(False, "--raw", help="Print the markdown body instead of HTML."),
    log_level: str | None = typer.Option("WARNING", "--log-level", help="Logging level."),
):
    """Print one article's rendered body."""
    cfg, content_dir = _prepare(config, input, log_level)
    result = _run(cfg, content_dir)

    try:
        article = result.index.get(slug)
    except ContentError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]{escape(article.title)}[/bold] ({article.published_at.date().isoformat()})")
    body = article.body if raw else result.rendered[slug].html
    console.print(body, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
