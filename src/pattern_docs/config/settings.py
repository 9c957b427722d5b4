"""Configuration for the pattern sync.

Settings are resolved in increasing precedence from the built-in defaults,
the ``[sync]`` table of ``pattern-docs.toml``, ``PATTERN_DOCS_*``
environment variables and finally CLI options. Relative paths read from
the config file are anchored at the directory holding that file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pattern_docs.config.exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "pattern-docs.toml"
ENV_PREFIX: Final[str] = "PATTERN_DOCS_"

DEFAULT_SOURCE_DIR = Path("../typescript-classes-functions/src/posts")
DEFAULT_DEST_DIR = Path("src/content/docs/patterns")

_PATH_FIELDS: Final[tuple[str, ...]] = ("source_dir", "dest_dir")


class SyncSettings(BaseSettings):
    """Where the sync reads articles from and writes pages to.

    Supports environment variable overrides such as
    ``PATTERN_DOCS_SOURCE_DIR`` and ``PATTERN_DOCS_DEST_DIR``.
    """

    source_dir: Path = Field(
        default=DEFAULT_SOURCE_DIR,
        description="Directory holding the numbered markdown articles",
    )
    dest_dir: Path = Field(
        default=DEFAULT_DEST_DIR,
        description="Site content directory that receives <slug>.md pages",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
    )

    def with_overrides(self, **overrides: Path | None) -> SyncSettings:
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return self.model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigValidationError(e.errors()) from e


def find_config(start_dir: Path) -> Path | None:
    """Search upward from ``start_dir`` for ``pattern-docs.toml``."""
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_FILENAME
        if config_path.is_file():
            return config_path
    return None


def _read_sync_table(config_path: Path) -> dict[str, Any]:
    try:
        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigLoadError(config_path, str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(config_path, str(e)) from e

    unknown = sorted(set(raw) - {"sync"})
    if unknown:
        raise ConfigValidationError(
            [{"loc": (key,), "msg": "Extra inputs are not permitted"} for key in unknown]
        )

    table = raw.get("sync", {})
    if not isinstance(table, dict):
        raise ConfigValidationError([{"loc": ("sync",), "msg": "Expected a table"}])
    return dict(table)


def _env_override_fields() -> set[str]:
    """Return the settings fields defined via environment variables."""
    return {name for name in SyncSettings.model_fields if f"{ENV_PREFIX}{name.upper()}" in os.environ}


def _anchor_paths(data: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    anchored = dict(data)
    for key in _PATH_FIELDS:
        if key in anchored and isinstance(anchored[key], str | Path):
            path = Path(anchored[key]).expanduser()
            anchored[key] = path if path.is_absolute() else base_dir / path
    return anchored


def load_settings(config_path: Path | None = None, *, start_dir: Path | None = None) -> SyncSettings:
    """Load sync settings.

    Args:
        config_path: Explicit config file. When None, ``pattern-docs.toml`` is
            searched for upward from ``start_dir`` (default: the working directory).
        start_dir: Where the upward search begins.

    Raises:
        ConfigLoadError: If the config file cannot be read or is not valid TOML.
        ConfigValidationError: If the settings fail validation.

    """
    if config_path is None:
        config_path = find_config(start_dir or Path.cwd())
    elif not config_path.is_file():
        raise ConfigLoadError(config_path, "file does not exist")

    data: dict[str, Any] = {}
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        file_data = {key: str(SyncSettings.model_fields[key].default) for key in _PATH_FIELDS}
        file_data.update(_read_sync_table(config_path))
        data = _anchor_paths(file_data, config_path.parent)

    for key in _env_override_fields():
        data.pop(key, None)

    try:
        return SyncSettings(**data)
    except ValidationError as e:
        raise ConfigValidationError(e.errors()) from e
