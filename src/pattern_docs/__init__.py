"""pattern-docs: markdown sync for the design-patterns documentation site.

Usage::

    from pathlib import Path
    from pattern_docs import sync_patterns

    sync_patterns(Path("../posts"), Path("src/content/docs/patterns"))
"""

from pattern_docs.exceptions import PatternDocsError
from pattern_docs.sync import (
    PATTERN_METADATA,
    MissingMetadataError,
    PageMetadata,
    check_sync,
    sync_patterns,
)

__version__ = "0.1.0"

__all__ = [
    "PATTERN_METADATA",
    "MissingMetadataError",
    "PageMetadata",
    "PatternDocsError",
    "__version__",
    "check_sync",
    "sync_patterns",
]
