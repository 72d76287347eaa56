"""Resource and diagnostic data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ResourceRecord:
    """One translatable string found in a source file."""

    project: str
    key: str
    source_locale: str
    source: str
    path_name: str
    datatype: str
    index: int
    res_type: str = "string"
    auto_key: bool = True
    state: str = "new"
    comment: Optional[str] = None

    @property
    def hash_key(self) -> Tuple[str, str, str, str]:
        """Identity of this record inside a translation set."""
        return (self.project, self.source_locale, self.key, self.datatype)


@dataclass(frozen=True)
class WarningEvent:
    """A malformed localization call reported by a lint rule."""

    rule_id: str
    message: str
    matched_text: str
    path_name: Optional[str]
    line_no: int


@dataclass
class ExtractResult:
    """Complete result of an extraction run over a project."""

    resources: List[ResourceRecord] = field(default_factory=list)
    warnings: List[WarningEvent] = field(default_factory=list)
    skipped_files: List[str] = field(default_factory=list)
    scanned_files: int = 0
    scan_duration_ms: float = 0.0

    @property
    def total_resources(self) -> int:
        return len(self.resources)

    @property
    def total_warnings(self) -> int:
        return len(self.warnings)
