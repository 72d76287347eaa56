"""Objective-C file type plugin.

Extracts resources from ``NSLocalizedString(@"...", @"comment")`` style
calls. Objective-C sources are only read; ``localize`` and ``write`` are
no-ops kept so generic callers can drive every file type the same way.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import List, Optional, Sequence

from locextract.project import Project
from locextract.resources.models import WarningEvent
from locextract.resources.translation_set import TranslationSet
from locextract.scanner.engine import ScanContext, scan

DEFAULT_LOCALE = "en-US"


class ObjectiveCFileType:
    """Which files are Objective-C and which datatype their resources carry."""

    def __init__(
        self,
        project: Project,
        datatype: Optional[str] = None,
        extensions: Optional[Sequence[str]] = None,
    ) -> None:
        self.project = project
        filetype_cfg = project.config.filetype
        self.datatype = datatype or filetype_cfg.datatype
        self.extensions = tuple(
            e.lower() for e in (extensions if extensions is not None else filetype_cfg.extensions)
        )

    def handles(self, path_name: str) -> bool:
        return PurePath(path_name).suffix.lower() in self.extensions

    def new_file(self, path_name: str) -> "ObjectiveCFile":
        return ObjectiveCFile(self.project, path_name, self)


class ObjectiveCFile:
    """One Objective-C source file and the resources found in it."""

    def __init__(
        self,
        project: Project,
        path_name: Optional[str],
        file_type: ObjectiveCFileType,
    ) -> None:
        self.project = project
        self.path_name = path_name
        self.type = file_type
        self.locale = (project and project.source_locale) or DEFAULT_LOCALE
        self.set: TranslationSet = project.new_translation_set(self.locale)
        self.logger = project.get_logger("locextract.filetypes.objc")
        self.warnings: List[WarningEvent] = []
        self.read_error: Optional[Exception] = None

    def _context(self) -> ScanContext:
        return ScanContext(
            project_id=self.project.project_id,
            source_locale=self.project.source_locale,
            datatype=self.type.datatype,
            call_pattern=self.project.call_pattern,
            path_name=self.path_name,
            rules=self.project.lint_rules,
            new_resource=self.project.new_resource,
        )

    def parse(self, data: str) -> None:
        """Add the resources found in *data* to this file's set and report lint warnings."""
        self.logger.debug("Extracting strings from %s", self.path_name)
        outcome = scan(data, self._context())
        self.set.add_all(outcome.resources)
        self.project.diagnostics.report(outcome.warnings, self.logger)
        self.warnings.extend(outcome.warnings)

    def extract(self) -> None:
        """Read the file and parse it. Read failures are logged, never raised."""
        if not self.path_name:
            return
        p = Path(self.project.root) / self.path_name
        try:
            data = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.read_error = exc
            self.logger.warning("Could not read file: %s (%s)", p, exc)
            return
        if data:
            self.parse(data)

    def get_translation_set(self) -> TranslationSet:
        return self.set

    # Objective-C sources are never localized or written back
    def localize(self, *args, **kwargs) -> None:
        pass

    def write(self, *args, **kwargs) -> None:
        pass
