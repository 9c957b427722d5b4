"""Command line interface for pattern-docs."""

from pattern_docs.cli.main import app

__all__ = ["app"]
