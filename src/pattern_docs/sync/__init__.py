"""Markdown sync from the pattern article sources into the site content tree."""

from pattern_docs.sync.check import CheckReport, check_sync
from pattern_docs.sync.driver import PlannedDocument, SyncedDocument, SyncReport, plan_sync, sync_patterns
from pattern_docs.sync.exceptions import (
    DirectoryCreationError,
    FileWriteError,
    FilesystemOperationError,
    MissingMetadataError,
    PageMetadataError,
    SourceDirectoryError,
    SyncError,
)
from pattern_docs.sync.links import normalize_links
from pattern_docs.sync.metadata import PATTERN_METADATA, PageMetadata, lookup_metadata
from pattern_docs.sync.navigation import SIDEBAR, SidebarGroup, sidebar_slugs
from pattern_docs.sync.slugs import slug_from_filename
from pattern_docs.sync.writer import render_document, write_document

__all__ = [
    "PATTERN_METADATA",
    "SIDEBAR",
    "CheckReport",
    "DirectoryCreationError",
    "FileWriteError",
    "FilesystemOperationError",
    "MissingMetadataError",
    "PageMetadata",
    "PageMetadataError",
    "PlannedDocument",
    "SidebarGroup",
    "SourceDirectoryError",
    "SyncError",
    "SyncReport",
    "SyncedDocument",
    "check_sync",
    "lookup_metadata",
    "normalize_links",
    "plan_sync",
    "render_document",
    "sidebar_slugs",
    "slug_from_filename",
    "sync_patterns",
    "write_document",
]
