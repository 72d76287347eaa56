"""Run the Objective-C extractor over a whole project tree."""

from __future__ import annotations

import logging
import time
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from locextract.filetypes.objc import ObjectiveCFileType
from locextract.project import Project
from locextract.resources.models import ExtractResult
from locextract.resources.translation_set import TranslationSet

logger = logging.getLogger(__name__)

_SKIP_DIRS = frozenset({".git", ".svn", ".hg", "build", "DerivedData", "Pods"})


def _is_ignored(path_name: str, ignore_globs: List[str]) -> bool:
    return any(fnmatch(path_name, g) for g in ignore_globs)


def discover_files(root: Path, file_type: ObjectiveCFileType) -> Iterator[str]:
    """Yield root-relative POSIX paths of every file *file_type* handles."""
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root)
        if any(part in _SKIP_DIRS for part in rel.parts[:-1]):
            continue
        if path.is_file() and file_type.handles(path.name):
            yield rel.as_posix()


def _relative(path: str, root: Path) -> str:
    p = Path(path)
    if p.is_absolute():
        try:
            return p.relative_to(root).as_posix()
        except ValueError:
            return p.as_posix()
    return p.as_posix()


def extract_project(
    project: Project,
    paths: Optional[Iterable[str]] = None,
    *,
    file_type: Optional[ObjectiveCFileType] = None,
) -> ExtractResult:
    """Extract every handled file under the project root (or only *paths*)."""
    start = time.perf_counter()
    file_type = file_type or ObjectiveCFileType(project)
    ignore_globs = project.config.scan.ignore

    if paths is None:
        candidates = list(discover_files(project.root, file_type))
    else:
        candidates = [_relative(p, project.root) for p in paths]

    merged: TranslationSet = project.new_translation_set()
    result = ExtractResult()

    for path_name in candidates:
        if _is_ignored(path_name, ignore_globs):
            result.skipped_files.append(f"{path_name} (ignored)")
            continue
        if not file_type.handles(path_name):
            result.skipped_files.append(f"{path_name} (unhandled type)")
            continue

        source_file = file_type.new_file(path_name)
        source_file.extract()
        if source_file.read_error is not None:
            result.skipped_files.append(f"{path_name} (unreadable)")
            continue

        result.scanned_files += 1
        merged.add_all(source_file.get_translation_set())
        result.warnings.extend(source_file.warnings)

    result.resources = merged.get_all()
    result.scan_duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        "Extracted %d resource(s) from %d file(s) with %d warning(s)",
        result.total_resources,
        result.scanned_files,
        result.total_warnings,
    )
    return result
