"""Filename to slug resolution for pattern articles."""

from __future__ import annotations

import re
from typing import Final

ORDER_PREFIX: Final = re.compile(r"^\d+-")
NAMESPACE_PREFIX: Final[str] = "patterns-"
MARKDOWN_SUFFIX: Final[str] = ".md"


def slug_from_filename(filename: str) -> str:
    """Derive the page slug from a source filename.

    ``03-patterns-validation.md`` and ``03-validation.md`` both yield
    ``validation``. Nothing else is normalized; a malformed name produces a
    slug that fails the metadata lookup.
    """
    stem = ORDER_PREFIX.sub("", filename, count=1)
    stem = stem.removesuffix(MARKDOWN_SUFFIX)
    return stem.removeprefix(NAMESPACE_PREFIX)
