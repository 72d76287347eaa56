"""Project context shared by every file plugin in one run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from locextract.config.schema import LocExtractConfig
from locextract.resources.models import ResourceRecord, WarningEvent
from locextract.resources.translation_set import TranslationSet
from locextract.rules.models import LintRule, build_call_pattern
from locextract.rules.registry import RuleRegistry, build_registry


class DiagnosticsSink:
    """Report lint rule matches through a logger and keep them for output."""

    def __init__(self) -> None:
        self.events: List[WarningEvent] = []

    def report(self, events: List[WarningEvent], log: logging.Logger) -> None:
        for event in events:
            log.warning(
                "%s %s (in file %s line %d)",
                event.message,
                event.matched_text.strip(),
                event.path_name or "<text>",
                event.line_no,
            )
            self.events.append(event)


class Project:
    """Project id, locale, root directory and the factories plugins need."""

    def __init__(
        self,
        config: LocExtractConfig,
        root: Path,
        *,
        registry: Optional[RuleRegistry] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
    ) -> None:
        self.config = config
        self.root = Path(root)
        self.registry = registry or build_registry(config, self.root)
        self.diagnostics = diagnostics or DiagnosticsSink()
        self.call_pattern = build_call_pattern(
            config.filetype.macro_prefixes, config.filetype.macro_name
        )

    @property
    def project_id(self) -> str:
        return self.config.project.id

    @property
    def source_locale(self) -> str:
        return self.config.project.source_locale

    @property
    def lint_rules(self) -> List[LintRule]:
        return self.registry.enabled_rules()

    def new_resource(self, **fields: Any) -> ResourceRecord:
        return ResourceRecord(**fields)

    def new_translation_set(self, locale: Optional[str] = None) -> TranslationSet:
        return TranslationSet(locale or self.source_locale)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)
