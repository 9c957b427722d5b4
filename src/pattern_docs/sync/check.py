"""Read-only verification that the site's pattern pages are in sync."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from pattern_docs.sync.driver import plan_sync
from pattern_docs.sync.frontmatter import page_problems
from pattern_docs.sync.links import normalize_links
from pattern_docs.sync.metadata import PATTERN_METADATA, PageMetadata
from pattern_docs.sync.navigation import sidebar_slugs
from pattern_docs.sync.slugs import MARKDOWN_SUFFIX
from pattern_docs.sync.writer import render_document, target_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckReport:
    """Findings of a sync check.

    Attributes:
        missing_metadata: Source filenames whose slug has no metadata entry.
        unused_metadata: Metadata slugs that no source file produces. Informational only.
        stale: Destination pages that are missing or differ from a fresh sync.
        invalid_frontmatter: (page name, problems) pairs for destination pages
            that are unreadable, unparseable, or lack a title or description.
        missing_pages: Sidebar slugs without a page in the destination.

    """

    missing_metadata: tuple[str, ...] = ()
    unused_metadata: tuple[str, ...] = ()
    stale: tuple[str, ...] = ()
    invalid_frontmatter: tuple[tuple[str, tuple[str, ...]], ...] = ()
    missing_pages: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not (self.missing_metadata or self.stale or self.invalid_frontmatter or self.missing_pages)


def _invalid_pages(dest_dir: Path) -> tuple[tuple[str, tuple[str, ...]], ...]:
    if not dest_dir.is_dir():
        return ()
    invalid = []
    for page in sorted(dest_dir.glob(f"*{MARKDOWN_SUFFIX}")):
        if not page.is_file():
            continue
        problems = page_problems(page)
        if problems:
            logger.debug("Invalid frontmatter in %s: %s", page, ", ".join(problems))
            invalid.append((page.name, problems))
    return tuple(invalid)


def check_sync(
    source_dir: Path,
    dest_dir: Path,
    metadata: Mapping[str, PageMetadata] = PATTERN_METADATA,
    navigation: Iterable[str] | None = None,
) -> CheckReport:
    """Compare the destination against what ``sync_patterns`` would write.

    Args:
        source_dir: Directory holding the numbered source articles.
        dest_dir: The site's pattern content directory.
        metadata: Slug to page metadata table.
        navigation: Slugs the site links to; defaults to the sidebar.

    """
    planned = plan_sync(source_dir, metadata)

    missing_metadata = []
    stale = []
    for doc in planned:
        if doc.metadata is None:
            missing_metadata.append(doc.source.name)
            continue
        expected = render_document(doc.metadata, normalize_links(doc.source.read_text(encoding="utf-8")))
        target = target_path(dest_dir, doc.slug)
        if not target.is_file() or target.read_bytes() != expected.encode("utf-8"):
            logger.debug("Stale page: %s", target)
            stale.append(target.name)

    produced = {doc.slug for doc in planned}
    unused = tuple(slug for slug in metadata if slug not in produced)

    slugs = sidebar_slugs() if navigation is None else navigation
    missing_pages = tuple(slug for slug in slugs if not target_path(dest_dir, slug).is_file())

    return CheckReport(
        missing_metadata=tuple(missing_metadata),
        unused_metadata=unused,
        stale=tuple(stale),
        invalid_frontmatter=_invalid_pages(dest_dir),
        missing_pages=missing_pages,
    )
