"""Batch sync of pattern articles into the site's content directory.

One straight pass over the sorted source files: resolve the slug, look up
its metadata, rewrite links, write the page. The first file without
metadata aborts the run; pages written before it are left in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pattern_docs.sync.exceptions import SourceDirectoryError
from pattern_docs.sync.links import normalize_links
from pattern_docs.sync.metadata import PATTERN_METADATA, PageMetadata, lookup_metadata
from pattern_docs.sync.slugs import MARKDOWN_SUFFIX, slug_from_filename
from pattern_docs.sync.writer import write_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncedDocument:
    source: Path
    target: Path
    slug: str


@dataclass(frozen=True, slots=True)
class SyncReport:
    documents: tuple[SyncedDocument, ...] = ()

    def __len__(self) -> int:
        return len(self.documents)


@dataclass(frozen=True, slots=True)
class PlannedDocument:
    """A source file resolved to its slug, before anything is written."""

    source: Path
    slug: str
    metadata: PageMetadata | None


def list_source_files(source_dir: Path) -> list[Path]:
    """Return the markdown files directly inside ``source_dir``, sorted by name.

    Raises:
        SourceDirectoryError: If ``source_dir`` is not an existing directory.

    """
    if not source_dir.is_dir():
        raise SourceDirectoryError(source_dir)
    return sorted(
        (path for path in source_dir.iterdir() if path.is_file() and path.name.endswith(MARKDOWN_SUFFIX)),
        key=lambda path: path.name,
    )


def plan_sync(
    source_dir: Path,
    metadata: Mapping[str, PageMetadata] = PATTERN_METADATA,
) -> list[PlannedDocument]:
    """Resolve every source file without writing; missing metadata is reported as ``None``."""
    planned = []
    for path in list_source_files(source_dir):
        slug = slug_from_filename(path.name)
        planned.append(PlannedDocument(source=path, slug=slug, metadata=metadata.get(slug)))
    return planned


def sync_patterns(
    source_dir: Path,
    dest_dir: Path,
    metadata: Mapping[str, PageMetadata] = PATTERN_METADATA,
) -> SyncReport:
    """Copy every source article into ``dest_dir`` as ``<slug>.md`` with frontmatter.

    Raises:
        SourceDirectoryError: If ``source_dir`` does not exist.
        MissingMetadataError: On the first file whose slug has no metadata entry.
        FilesystemOperationError: If a page cannot be written.

    """
    files = list_source_files(source_dir)
    logger.debug("Found %d markdown file(s) in %s", len(files), source_dir)

    synced: list[SyncedDocument] = []
    for path in files:
        slug = slug_from_filename(path.name)
        meta = lookup_metadata(slug, metadata, source=path.name)

        body = normalize_links(path.read_text(encoding="utf-8"))
        target = write_document(dest_dir, slug, meta, body)

        logger.info("Synced %s -> %s", path.name, target.name)
        synced.append(SyncedDocument(source=path, target=target, slug=slug))

    return SyncReport(documents=tuple(synced))
