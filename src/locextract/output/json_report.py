"""JSON reporter."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from locextract.resources.models import ExtractResult


def to_dict(result: ExtractResult, *, project: str, source_locale: str) -> Dict[str, Any]:
    """Convert ExtractResult to a JSON-serialisable dict."""
    resources: List[Dict[str, Any]] = []
    for r in result.resources:
        resources.append({
            "key": r.key,
            "source": r.source,
            "type": r.res_type,
            "project": r.project,
            "source_locale": r.source_locale,
            "path": r.path_name,
            "datatype": r.datatype,
            "state": r.state,
            "auto_key": r.auto_key,
            "index": r.index,
            **({"comment": r.comment} if r.comment is not None else {}),
        })

    warnings: List[Dict[str, Any]] = []
    for w in result.warnings:
        warnings.append({
            "rule": w.rule_id,
            "message": w.message,
            "match": w.matched_text.strip(),
            "file": w.path_name,
            "line": w.line_no,
        })

    return {
        "version": "1.0",
        "project": project,
        "source_locale": source_locale,
        "scanned_files": result.scanned_files,
        "total_resources": result.total_resources,
        "resources": resources,
        "warnings": warnings,
        "skipped_files": result.skipped_files,
        "scan_duration_ms": result.scan_duration_ms,
    }


def render(result: ExtractResult, *, project: str, source_locale: str) -> str:
    """Return formatted JSON string."""
    return json.dumps(
        to_dict(result, project=project, source_locale=source_locale),
        indent=2,
        ensure_ascii=False,
    )
