"""Shared fixtures for the pattern-docs test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from pattern_docs.config.settings import ENV_PREFIX

SourceWriter = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep developer settings out of the tests and drop the CLI log handler afterwards."""
    for name in ("SOURCE_DIR", "DEST_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)

    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if getattr(handler, "_pattern_docs_managed", False):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture()
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "posts"
    path.mkdir()
    return path


@pytest.fixture()
def dest_dir(tmp_path: Path) -> Path:
    return tmp_path / "site" / "src" / "content" / "docs" / "patterns"


@pytest.fixture()
def write_source(source_dir: Path) -> SourceWriter:
    """Return a helper that writes an article into the source directory."""

    def _write(filename: str, body: str) -> Path:
        path = source_dir / filename
        path.write_text(body, encoding="utf-8")
        return path

    return _write
