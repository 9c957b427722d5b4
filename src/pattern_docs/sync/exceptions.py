"""Custom exceptions for the markdown sync pipeline."""

from __future__ import annotations

from pathlib import Path

from pattern_docs.exceptions import PatternDocsError


class SyncError(PatternDocsError):
    """Base class for sync errors."""


class MissingMetadataError(SyncError):
    """Raised when a derived slug has no entry in the metadata table."""

    def __init__(self, slug: str, source: str | None = None) -> None:
        self.slug = slug
        self.source = source
        message = f'Missing metadata for slug "{slug}"'
        if source is not None:
            message += f" (source file: {source})"
        super().__init__(message)


class SourceDirectoryError(SyncError):
    """Raised when the source directory does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source directory not found: {path}")


class FilesystemOperationError(SyncError):
    """Base exception for file I/O errors."""

    def __init__(self, path: str, original_exception: Exception, message: str | None = None) -> None:
        self.path = path
        self.original_exception = original_exception
        if message is None:
            message = f"An error occurred at path: {self.path}. Original error: {original_exception}"
        super().__init__(message)


class DirectoryCreationError(FilesystemOperationError):
    """Raised when creating a directory fails."""

    def __init__(self, path: str, original_exception: Exception) -> None:
        message = f"Failed to create directory at: {path}. Original error: {original_exception}"
        super().__init__(path, original_exception, message=message)


class FileWriteError(FilesystemOperationError):
    """Raised when writing a file fails."""

    def __init__(self, path: str, original_exception: Exception) -> None:
        message = f"Failed to write file to: {path}. Original error: {original_exception}"
        super().__init__(path, original_exception, message=message)


class PageMetadataError(SyncError):
    """Raised when a site page cannot be read or its frontmatter cannot be parsed."""

    def __init__(self, path: Path, reason: str, detail: str) -> None:
        self.path = path
        self.reason = reason
        self.detail = detail
        super().__init__(f"Page {path} is {reason}: {detail}")
