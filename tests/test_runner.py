"""Integration tests for the pipeline runner."""

from pathlib import Path

import pytest

from content_pipeline.config import AppConfig
from content_pipeline.core.errors import NotFoundError, RenderDegradationWarning
from content_pipeline.output import renderer
from content_pipeline.runner import run_pipeline



def test_sample_posts_build_three_entries_newest_first(posts_dir: Path):
    result = run_pipeline(posts_dir, AppConfig())

    assert len(result.index) == 3
    assert result.index.slugs() == ["preview", "dynamic-routing", "hello-world"]
    assert len(set(result.index.slugs())) == 3
    assert result.errors == []
    assert result.similar == []
    assert set(result.rendered) == {"preview", "dynamic-routing", "hello-world"}


def test_sample_post_bodies_render(posts_dir: Path):
    result = run_pipeline(posts_dir, AppConfig())

    html = result.rendered["dynamic-routing"].html
    assert "<h2>getStaticPaths</h2>" in html
    assert "<ol>" in html
    assert result.degraded == []


def test_missing_title_is_excluded_and_reported(tmp_path: Path, write_post):
    write_post(tmp_path, "good.md", title="Good")
    write_post(tmp_path, "bad.md", title=None)

    result = run_pipeline(tmp_path, AppConfig())

    assert result.index.slugs() == ["good"]
    assert "bad" not in result.index
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.path.name == "bad.md"
    assert error.kind == "MalformedFrontmatterError"
    assert "title" in error.message


def test_empty_directory_gives_empty_index(tmp_path: Path):
    (tmp_path / "notes.txt").write_text("not an article", encoding="utf-8")

    result = run_pipeline(tmp_path, AppConfig())

    assert len(result.index) == 0
    assert result.errors == []


def test_missing_directory_is_fatal(tmp_path: Path):
    with pytest.raises(NotFoundError):
        run_pipeline(tmp_path / "missing", AppConfig())


def test_duplicate_slug_keeps_first_file(tmp_path: Path, write_post):
    write_post(tmp_path, "My Post.md", title="First")
    write_post(tmp_path, "my-post.md", title="Second")

    result = run_pipeline(tmp_path, AppConfig())

    assert result.index.slugs() == ["my-post"]
    assert result.index.get("my-post").title == "First"
    assert [(error.path.name, error.kind) for error in result.errors] == [
        ("my-post.md", "DuplicateSlugError")
    ]


def test_parallel_run_matches_sequential(tmp_path: Path, write_post):
    for number in range(12):
        write_post(tmp_path, f"post-{number:02d}.md", date=f"2021-01-{number % 4 + 1:02d}")
    write_post(tmp_path, "broken.md", title=None)

    sequential = run_pipeline(tmp_path, AppConfig())
    cfg = AppConfig()
    cfg.pipeline.workers = 4
    parallel = run_pipeline(tmp_path, cfg)

    assert parallel.index.slugs() == sequential.index.slugs()
    assert [error.path for error in parallel.errors] == [error.path for error in sequential.errors]


def test_render_failure_is_isolated_to_one_article(tmp_path: Path, monkeypatch, write_post):
    original = renderer._convert

    def flaky(body, extensions):
        if "BROKEN" in body:
            raise ValueError("cannot parse")
        return original(body, extensions)

    monkeypatch.setattr(renderer, "_convert", flaky)
    write_post(tmp_path, "fine.md", body="*fine*\n")
    write_post(tmp_path, "odd.md", body="BROKEN <b>markup</b>\n")

    with pytest.warns(RenderDegradationWarning):
        result = run_pipeline(tmp_path, AppConfig())

    assert len(result.index) == 2
    assert result.degraded == ["odd"]
    assert "<em>fine</em>" in result.rendered["fine"].html
    assert "&lt;b&gt;markup&lt;/b&gt;" in result.rendered["odd"].html


def test_similar_titles_are_reported_not_dropped(tmp_path: Path, write_post):
    write_post(tmp_path, "preview.md", title="Preview Mode for Static Generation")
    write_post(tmp_path, "preview-again.md", title="Preview mode for static generation!")

    result = run_pipeline(tmp_path, AppConfig())

    assert len(result.index) == 2
    assert [(pair.first, pair.second) for pair in result.similar] == [("preview", "preview-again")]


def test_similar_title_report_can_be_disabled(tmp_path: Path, write_post):
    write_post(tmp_path, "a.md", title="Same Title")
    write_post(tmp_path, "b.md", title="Same Title")
    cfg = AppConfig()
    cfg.dedup.report_similar = False

    result = run_pipeline(tmp_path, cfg)

    assert result.similar == []
    assert len(result.index) == 2


def test_invalid_yaml_dates_do_not_stop_the_run(tmp_path: Path, write_post):
    write_post(tmp_path, "good.md", title="Good")
    (tmp_path / "feb.md").write_text(
        "---\ntitle: Feb\ndate: 2020-02-30\nexcerpt: x\n---\nBody\n", encoding="utf-8"
    )
    (tmp_path / "month.md").write_text(
        "---\ntitle: Month\ndate: 2020-13-45\nexcerpt: x\n---\nBody\n", encoding="utf-8"
    )

    result = run_pipeline(tmp_path, AppConfig())

    assert result.index.slugs() == ["good"]
    assert sorted((error.path.name, error.kind) for error in result.errors) == [
        ("feb.md", "MalformedFrontmatterError"),
        ("month.md", "MalformedFrontmatterError"),
    ]


def test_deeply_nested_frontmatter_does_not_stop_the_run(tmp_path: Path, write_post):
    write_post(tmp_path, "good.md", title="Good")
    nested = "[" * 3000 + "]" * 3000
    (tmp_path / "deep.md").write_text(
        f"---\ntitle: Deep\ndate: '2020-01-01'\nexcerpt: x\nx: {nested}\n---\nBody\n",
        encoding="utf-8",
    )

    result = run_pipeline(tmp_path, AppConfig())

    assert result.index.slugs() == ["good"]
    assert [(error.path.name, error.kind) for error in result.errors] == [
        ("deep.md", "MalformedFrontmatterError")
    ]
