"""Unit tests for page rendering and writing."""

from pathlib import Path

import pytest
import yaml

from pattern_docs.sync.exceptions import DirectoryCreationError, FileWriteError
from pattern_docs.sync.metadata import PATTERN_METADATA, PageMetadata
from pattern_docs.sync.writer import render_document, render_frontmatter, write_document

VALIDATION = PATTERN_METADATA["validation"]


# region: Tests for render_document
def test_render_document_starts_with_exact_header():
    rendered = render_document(VALIDATION, "Body text.\n")

    expected_header = (
        "---\n"
        "title: Validation at the Boundary\n"
        f"description: {VALIDATION.description}\n"
        "---\n"
        "\n"
    )
    assert rendered.startswith(expected_header)
    assert rendered == expected_header + "Body text.\n"


def test_render_document_trims_leading_whitespace():
    rendered = render_document(VALIDATION, "\n\n   # Heading\n\nText\n")
    assert rendered.endswith("---\n\n# Heading\n\nText\n")


def test_render_document_ends_with_single_newline():
    assert render_document(VALIDATION, "Text").endswith("---\n\nText\n")
    assert render_document(VALIDATION, "Text\n\n\n").endswith("---\n\nText\n")


def test_render_document_collapses_trailing_crlf():
    rendered = render_document(PageMetadata(title="t", description="d"), "x\r\n\r\n")
    assert rendered == "---\ntitle: t\ndescription: d\n---\n\nx\n"


def test_long_descriptions_are_not_wrapped():
    meta = PageMetadata(title="Long", description=" ".join(["word"] * 60))
    header = render_frontmatter(meta)
    assert header.count("\n") == 4


def test_apostrophes_stay_plain():
    rendered = render_document(PATTERN_METADATA["conclusion"], "Done.")
    assert "title: What We've Built\n" in rendered


def test_titles_yaml_would_misread_are_quoted_and_round_trip():
    meta = PageMetadata(title="Errors: the typed way", description="#1 pattern")
    header = render_frontmatter(meta)

    parsed = yaml.safe_load(header.strip("-\n"))
    assert parsed == {"title": "Errors: the typed way", "description": "#1 pattern"}


# endregion


# region: Tests for write_document
def test_write_document_writes_slug_file(tmp_path: Path):
    path = write_document(tmp_path, "validation", VALIDATION, "Hello")

    assert path == tmp_path / "validation.md"
    assert path.read_text(encoding="utf-8") == render_document(VALIDATION, "Hello")


def test_write_document_creates_destination(tmp_path: Path):
    dest = tmp_path / "src" / "content" / "docs" / "patterns"
    write_document(dest, "errors", PATTERN_METADATA["errors"], "Body")
    assert (dest / "errors.md").is_file()


def test_write_document_overwrites_existing_file(tmp_path: Path):
    (tmp_path / "errors.md").write_text("old content", encoding="utf-8")
    write_document(tmp_path, "errors", PATTERN_METADATA["errors"], "new body")
    content = (tmp_path / "errors.md").read_text(encoding="utf-8")
    assert "old content" not in content
    assert content.endswith("\nnew body\n")


def test_write_document_raises_directory_creation_error(tmp_path: Path, monkeypatch):
    def mock_mkdir(*args, **kwargs):
        raise OSError("Permission denied")

    monkeypatch.setattr(Path, "mkdir", mock_mkdir)
    with pytest.raises(DirectoryCreationError) as excinfo:
        write_document(tmp_path / "new_dir", "errors", PATTERN_METADATA["errors"], "Body")
    assert "Permission denied" in str(excinfo.value)


def test_write_document_raises_file_write_error(tmp_path: Path, monkeypatch):
    def mock_write_text(*args, **kwargs):
        raise OSError("Disk full")

    monkeypatch.setattr(Path, "write_text", mock_write_text)
    with pytest.raises(FileWriteError) as excinfo:
        write_document(tmp_path, "errors", PATTERN_METADATA["errors"], "Body")
    assert excinfo.value.path == str(tmp_path / "errors.md")
    assert isinstance(excinfo.value.original_exception, OSError)


# endregion
