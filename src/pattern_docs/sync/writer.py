"""Rendering and writing of synced markdown pages.

Each page is a YAML frontmatter block holding the title and description,
followed by the article body. Output files are overwritten unconditionally
so a rerun with unchanged inputs reproduces identical bytes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import yaml

from pattern_docs.sync.exceptions import DirectoryCreationError, FileWriteError

if TYPE_CHECKING:
    from pathlib import Path

    from pattern_docs.sync.metadata import PageMetadata

logger = logging.getLogger(__name__)


def _prepare_frontmatter(metadata: PageMetadata) -> dict[str, Any]:
    return {"title": metadata.title, "description": metadata.description}


def render_frontmatter(metadata: PageMetadata) -> str:
    """Return the delimited frontmatter block, ending with the closing ``---``."""
    yaml_front = yaml.dump(
        _prepare_frontmatter(metadata),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )
    return f"---\n{yaml_front}---\n"


def render_document(metadata: PageMetadata, body: str) -> str:
    """Compose the full page: frontmatter, a blank line, then the body.

    Leading whitespace of the body is dropped and the page always ends with
    a single newline.
    """
    content = body.lstrip().rstrip("\r\n")
    return f"{render_frontmatter(metadata)}\n{content}\n"


def target_path(dest_dir: Path, slug: str) -> Path:
    return dest_dir / f"{slug}.md"


def write_document(dest_dir: Path, slug: str, metadata: PageMetadata, body: str) -> Path:
    """Write ``<dest_dir>/<slug>.md``, replacing any existing file.

    Raises:
        DirectoryCreationError: If the destination directory cannot be created.
        FileWriteError: If the page cannot be written.

    """
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(str(dest_dir), e) from e

    filepath = target_path(dest_dir, slug)
    try:
        filepath.write_text(render_document(metadata, body), encoding="utf-8")
    except OSError as e:
        raise FileWriteError(str(filepath), e) from e

    logger.debug("Wrote %s", filepath)
    return filepath
