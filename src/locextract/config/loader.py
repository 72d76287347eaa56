"""Load and merge configuration from .locextract.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from locextract.config.schema import (
    OUTPUT_FORMATS,
    FileTypeConfig,
    LocExtractConfig,
    OutputConfig,
    ProjectConfig,
    RulesConfig,
    ScanConfig,
)

CONFIG_FILENAME = ".locextract.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: LocExtractConfig) -> None:
    """Apply LOCEXTRACT_* environment variable overrides."""
    if val := os.environ.get("LOCEXTRACT_PROJECT_ID"):
        cfg.project.id = val
    if val := os.environ.get("LOCEXTRACT_SOURCE_LOCALE"):
        cfg.project.source_locale = val
    if val := os.environ.get("LOCEXTRACT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("LOCEXTRACT_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if val := os.environ.get("LOCEXTRACT_IGNORE_PATHS"):
        cfg.scan.ignore.extend(p.strip() for p in val.split(os.pathsep) if p.strip())


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(section_data).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: LocExtractConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    if not cfg.filetype.macro_prefixes:
        raise ConfigError("filetype.macro_prefixes must not be empty")
    if not cfg.filetype.macro_name:
        raise ConfigError("filetype.macro_name must not be empty")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> LocExtractConfig:
    """Load, validate, and return a LocExtractConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = LocExtractConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = LocExtractConfig(
            version=raw.get("version", "1.0"),
            project=_build_section(raw, ProjectConfig, "project"),
            filetype=_build_section(raw, FileTypeConfig, "filetype"),
            scan=_build_section(raw, ScanConfig, "scan"),
            output=_build_section(raw, OutputConfig, "output"),
            rules=_build_section(raw, RulesConfig, "rules"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
