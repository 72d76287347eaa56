"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json", "sarif"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json", "sarif")


@dataclass
class ProjectConfig:
    id: str = "project"
    source_locale: str = "en-US"


@dataclass
class FileTypeConfig:
    datatype: str = "x-objective-c"
    extensions: List[str] = field(default_factory=lambda: [".m", ".mm", ".h"])
    macro_prefixes: List[str] = field(default_factory=lambda: ["NS", "HT"])
    macro_name: str = "LocalizedString"


@dataclass
class ScanConfig:
    ignore: List[str] = field(default_factory=list)  # fnmatch globs, relative to root
    fail_on_warnings: bool = False


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    show_resources: bool = True


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)
    custom_dir: str = ".locextract-rules"


@dataclass
class LocExtractConfig:
    version: str = "1.0"
    project: ProjectConfig = field(default_factory=ProjectConfig)
    filetype: FileTypeConfig = field(default_factory=FileTypeConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
