"""Configuration loading for pattern-docs."""

from pattern_docs.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from pattern_docs.config.settings import CONFIG_FILENAME, SyncSettings, find_config, load_settings

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "SyncSettings",
    "find_config",
    "load_settings",
]
