"""Tests for the ``pattern-docs`` Typer commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pattern_docs.cli.main import CHECK_FAILED_EXIT_CODE, app
from pattern_docs.sync.metadata import PATTERN_METADATA
from pattern_docs.sync.navigation import sidebar_slugs

runner = CliRunner()


@pytest.fixture(autouse=True)
def _run_in_tmp(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _dirs(source_dir: Path, dest_dir: Path) -> list[str]:
    return ["--source-dir", str(source_dir), "--dest-dir", str(dest_dir)]


def test_sync_command_writes_pages(source_dir: Path, dest_dir: Path, write_source):
    write_source("01-patterns-validation.md", "See (/patterns-errors) for more.")
    write_source("04-patterns-errors.md", "Errors")

    result = runner.invoke(app, ["sync", *_dirs(source_dir, dest_dir)])

    assert result.exit_code == 0, result.output
    assert "Synced 2 page(s)" in result.output
    assert "(/patterns/errors)" in (dest_dir / "validation.md").read_text(encoding="utf-8")


def test_sync_command_reads_config_file(tmp_path: Path, write_source):
    write_source("02-functions.md", "Functions")
    (tmp_path / "pattern-docs.toml").write_text('[sync]\nsource_dir = "posts"\ndest_dir = "out"\n', encoding="utf-8")

    result = runner.invoke(app, ["sync"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "functions.md").is_file()


def test_sync_command_missing_metadata_exits_with_error(source_dir: Path, dest_dir: Path, write_source):
    write_source("01-patterns-testing.md", "Testing")
    write_source("02-patterns-unknown.md", "Unknown")

    result = runner.invoke(app, ["sync", *_dirs(source_dir, dest_dir)])

    assert result.exit_code == 1
    assert "Missing metadata" in result.output
    assert '"unknown"' in result.output
    assert not (dest_dir / "unknown.md").exists()


def test_sync_command_debug_reraises(source_dir: Path, dest_dir: Path, write_source):
    write_source("02-patterns-unknown.md", "Unknown")

    result = runner.invoke(app, ["sync", *_dirs(source_dir, dest_dir), "--debug"])

    assert result.exit_code != 0
    assert type(result.exception).__name__ == "MissingMetadataError"


def test_sync_command_missing_source_dir(tmp_path: Path, dest_dir: Path):
    result = runner.invoke(app, ["sync", *_dirs(tmp_path / "absent", dest_dir)])

    assert result.exit_code == 1
    assert "Source Directory Error" in result.output


def test_sync_command_bad_config(tmp_path: Path):
    (tmp_path / "pattern-docs.toml").write_text("[sync\n", encoding="utf-8")

    result = runner.invoke(app, ["sync"])

    assert result.exit_code == 1
    assert "Configuration Error" in result.output


def _write_full_site(source_dir: Path, dest_dir: Path) -> None:
    for number, slug in enumerate(PATTERN_METADATA, start=1):
        (source_dir / f"{number:02d}-patterns-{slug}.md").write_text(f"# {slug}\n", encoding="utf-8")
    runner.invoke(app, ["sync", *_dirs(source_dir, dest_dir)])
    for slug in sidebar_slugs():
        page = dest_dir / f"{slug}.md"
        if not page.exists():
            page.write_text(f"---\ntitle: {slug}\ndescription: Hand-written page.\n---\n\nBody\n", encoding="utf-8")


def test_check_command_passes_after_sync(source_dir: Path, dest_dir: Path):
    _write_full_site(source_dir, dest_dir)

    result = runner.invoke(app, ["check", *_dirs(source_dir, dest_dir)])

    assert result.exit_code == 0, result.output
    assert "up to date" in result.output


def test_check_command_reports_stale_pages(source_dir: Path, dest_dir: Path):
    _write_full_site(source_dir, dest_dir)
    (source_dir / "01-patterns-testing.md").write_text("# changed\n", encoding="utf-8")

    result = runner.invoke(app, ["check", *_dirs(source_dir, dest_dir)])

    assert result.exit_code == CHECK_FAILED_EXIT_CODE
    assert "STALE" in result.output
    assert "testing.md" in result.output


def test_list_command_shows_slugs(source_dir: Path, write_source):
    write_source("01-patterns-testing.md", "")
    write_source("05-patterns-workflows.md", "")

    result = runner.invoke(app, ["list", "--source-dir", str(source_dir)])

    assert result.exit_code == 0, result.output
    assert "testing" in result.output
    assert "workflows" in result.output
    assert "missing metadata" in result.output


def test_check_command_reports_unreadable_pages(source_dir: Path, dest_dir: Path):
    _write_full_site(source_dir, dest_dir)
    (dest_dir / "assets.md").mkdir()
    (dest_dir / "legacy.md").write_bytes(b"---\ntitle: Caf\xe9\n---\n")

    result = runner.invoke(app, ["check", *_dirs(source_dir, dest_dir)])

    assert result.exit_code == CHECK_FAILED_EXIT_CODE, result.output
    assert "INVALID FRONTMATTER" in result.output
    assert "legacy.md (unreadable)" in result.output
    assert "assets.md" not in result.output
