"""SARIF v2.1.0 reporter for malformed localization calls.

Only warnings are reported; extracted resources are not findings.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from locextract import __version__
from locextract.resources.models import ExtractResult
from locextract.rules.models import LintRule

_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"


def to_dict(result: ExtractResult, rules: List[LintRule]) -> Dict[str, Any]:
    """Convert ExtractResult warnings to a SARIF v2.1.0 dict."""
    by_id = {r.id: r for r in rules}
    sarif_rules: List[Dict[str, Any]] = []
    seen_rules: set[str] = set()
    results: List[Dict[str, Any]] = []

    for w in result.warnings:
        if w.rule_id not in seen_rules:
            seen_rules.add(w.rule_id)
            rule = by_id.get(w.rule_id)
            sarif_rules.append({
                "id": w.rule_id,
                "name": rule.name if rule else w.rule_id,
                "shortDescription": {"text": rule.name if rule else w.rule_id},
                "fullDescription": {"text": (rule.description if rule else "") or w.message},
                "defaultConfiguration": {"level": "warning"},
            })

        results.append({
            "ruleId": w.rule_id,
            "level": "warning",
            "message": {"text": f"{w.message} {w.matched_text.strip()}"},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": w.path_name or ""},
                        "region": {
                            "startLine": max(w.line_no, 1),
                            "snippet": {"text": w.matched_text.strip()},
                        },
                    }
                }
            ],
        })

    return {
        "$schema": _SCHEMA,
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "locextract",
                        "version": __version__,
                        "rules": sarif_rules,
                    }
                },
                "results": results,
            }
        ],
    }


def render(result: ExtractResult, rules: List[LintRule]) -> str:
    """Return SARIF JSON string."""
    return json.dumps(to_dict(result, rules), indent=2)
