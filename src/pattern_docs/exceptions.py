"""Centralized exceptions for pattern-docs."""


class PatternDocsError(Exception):
    """Base exception for all pattern-docs errors."""
