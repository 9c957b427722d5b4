"""Link rewriting between the article sources and the site routes."""

from __future__ import annotations

from typing import Final

SOURCE_LINK_PREFIX: Final[str] = "(/patterns-"
SITE_LINK_PREFIX: Final[str] = "(/patterns/"


def normalize_links(markdown: str) -> str:
    """Rewrite ``(/patterns-foo)`` links to the ``(/patterns/foo)`` route form."""
    return markdown.replace(SOURCE_LINK_PREFIX, SITE_LINK_PREFIX)
