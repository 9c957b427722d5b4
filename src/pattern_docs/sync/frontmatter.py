"""Frontmatter inspection for pages in the site's content directory.

Synced pages and hand-written ones alike must carry a non-empty ``title``
and ``description``; ``check`` uses these helpers to find the ones that
don't, or that cannot be read at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import frontmatter
import yaml

from pattern_docs.sync.exceptions import PageMetadataError

if TYPE_CHECKING:
    from pathlib import Path

REQUIRED_KEYS: Final[tuple[str, ...]] = ("title", "description")

UNREADABLE: Final[str] = "unreadable"
UNPARSEABLE: Final[str] = "unparseable"


def read_page_metadata(path: Path) -> dict[str, Any]:
    """Return the frontmatter of a UTF-8 page; pages without any yield ``{}``.

    Raises:
        PageMetadataError: With reason ``unreadable`` when the file cannot be
            read as UTF-8, or ``unparseable`` when its frontmatter is not valid YAML.

    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PageMetadataError(path, UNREADABLE, str(e)) from e

    try:
        page = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise PageMetadataError(path, UNPARSEABLE, str(e)) from e
    return dict(page.metadata)


def missing_required_keys(metadata: dict[str, Any]) -> list[str]:
    """Return the required keys that are absent or blank in ``metadata``."""
    missing = []
    for key in REQUIRED_KEYS:
        value = metadata.get(key)
        if not isinstance(value, str) or not value.strip():
            missing.append(key)
    return missing


def page_problems(path: Path) -> tuple[str, ...]:
    """List what is wrong with a page's frontmatter; empty when it is valid."""
    try:
        metadata = read_page_metadata(path)
    except PageMetadataError as e:
        return (e.reason,)
    return tuple(f"missing {key}" for key in missing_required_keys(metadata))
