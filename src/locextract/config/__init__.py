"""Configuration loading, schema, and defaults."""

from locextract.config.loader import ConfigError, load_config
from locextract.config.schema import FileTypeConfig, LocExtractConfig, ProjectConfig

__all__ = [
    "ConfigError",
    "FileTypeConfig",
    "LocExtractConfig",
    "ProjectConfig",
    "load_config",
]
