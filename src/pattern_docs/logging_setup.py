"""Rich logging for the pattern-docs CLI."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

LOG_LEVEL_ENV: Final[str] = "PATTERN_DOCS_LOG_LEVEL"

console = Console()


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _is_ours(handler: logging.Handler) -> bool:
    return getattr(handler, "_pattern_docs_managed", False)


def configure_logging(*, debug: bool = False) -> None:
    """Route the root logger through a single Rich handler on ``console``.

    Each command calls this; repeated calls only adjust the level.
    """
    root_logger = logging.getLogger()

    if not any(_is_ours(handler) for handler in root_logger.handlers):
        root_logger.handlers.clear()
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._pattern_docs_managed = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)

    root_logger.setLevel(logging.DEBUG if debug else _level_from_env())
    logging.captureWarnings(True)
