"""Content loader: yields raw article files from a content directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from ..core.errors import NotFoundError
from ..core.types import RawFile
from ..utils.logging import log_event

DEFAULT_EXTENSIONS = (".md", ".markdown")


def list_content_files(directory: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[Path]:
    """List top-level content files in a directory.

    Hidden files and subdirectories are skipped. Suffixes are matched
    case-insensitively. Paths are sorted so duplicate-slug resolution
    downstream does not depend on filesystem order.

    Raises:
        NotFoundError: If the directory does not exist or is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotFoundError(f"content directory not found: {directory}")

    allowed = {_normalize_extension(ext) for ext in extensions}
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and not path.name.startswith(".") and path.suffix.lower() in allowed
    )


def load_content(
    directory: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    logger: logging.Logger | None = None,
) -> Iterator[RawFile]:
    """Return a lazy sequence of raw files from a content directory.

    The directory check happens immediately; file contents are read only as
    the sequence is consumed.

    Args:
        directory: Directory holding one file per article
        extensions: File suffixes to accept
        logger: Logger for skipped files

    Returns:
        Iterator of RawFile records

    Raises:
        NotFoundError: If the directory does not exist
    """
    paths = list_content_files(directory, extensions)
    return _read_files(paths, logger)


def _read_files(paths: list[Path], logger: logging.Logger | None) -> Iterator[RawFile]:
    for path in paths:
        try:
            text = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            log_event(
                logger,
                "Skipping undecodable file",
                event="file_skipped",
                path=str(path),
                error=str(exc),
            )
            continue
        yield RawFile(path=path, text=text)


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext
