"""Tests for the content loader."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from content_pipeline.core.errors import NotFoundError
from content_pipeline.input.loader import list_content_files, load_content


def test_missing_directory_fails_before_iteration(tmp_path: Path):
    with pytest.raises(NotFoundError):
        load_content(tmp_path / "missing")


def test_file_path_is_not_a_content_directory(tmp_path: Path):
    path = tmp_path / "post.md"
    path.write_text("x", encoding="utf-8")

    with pytest.raises(NotFoundError):
        load_content(path)


def test_filters_by_extension(tmp_path: Path):
    (tmp_path / "a.md").write_text("a", encoding="utf-8")
    (tmp_path / "b.MARKDOWN").write_text("b", encoding="utf-8")
    (tmp_path / "c.txt").write_text("c", encoding="utf-8")
    (tmp_path / ".draft.md").write_text("d", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "e.md").write_text("e", encoding="utf-8")

    names = [raw.path.name for raw in load_content(tmp_path)]

    assert names == ["a.md", "b.MARKDOWN"]


def test_extensions_without_leading_dot(tmp_path: Path):
    (tmp_path / "a.md").write_text("a", encoding="utf-8")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")

    assert [path.name for path in list_content_files(tmp_path, ["txt"])] == ["b.txt"]


def test_load_content_is_lazy_and_reads_text(tmp_path: Path):
    (tmp_path / "a.md").write_text("héllo", encoding="utf-8")

    records = load_content(tmp_path)

    assert isinstance(records, Iterator)
    raw = next(records)
    assert raw.text == "héllo"
    assert raw.path == tmp_path / "a.md"


def test_undecodable_file_is_skipped(tmp_path: Path):
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa not utf-8")
    (tmp_path / "good.md").write_text("ok", encoding="utf-8")

    assert [raw.path.name for raw in load_content(tmp_path)] == ["good.md"]


def test_empty_directory_yields_nothing(tmp_path: Path):
    assert list(load_content(tmp_path)) == []
