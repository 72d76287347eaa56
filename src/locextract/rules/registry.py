"""Lint rule registry: built-in and custom rules, filtered by config."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from locextract.config.schema import LocExtractConfig
from locextract.rules.models import LintRule, build_call_pattern

logger = logging.getLogger(__name__)

_RULE_SUFFIXES = (".yaml", ".yml")


class RuleError(Exception):
    """Raised when a custom rule file is malformed."""


def _rule_from_entry(entry: Any, path: Path) -> LintRule:
    if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
        raise RuleError(f"{path}: every rule needs an 'id' and a 'pattern'")
    rule_id = str(entry["id"])
    return LintRule(
        id=rule_id,
        name=entry.get("name", rule_id),
        message=entry.get("message", f"Warning: {rule_id}:"),
        pattern=str(entry["pattern"]),
        description=entry.get("description", ""),
    )


class RuleRegistry:
    """Lint rules keyed by id, in registration order."""

    def __init__(self) -> None:
        self._rules: Dict[str, LintRule] = {}

    def register(self, rule: LintRule) -> None:
        # A custom rule with a built-in id replaces the built-in
        self._rules[rule.id] = rule

    def register_many(self, rules: List[LintRule]) -> None:
        for rule in rules:
            self.register(rule)

    @property
    def all_rules(self) -> List[LintRule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[LintRule]:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> List[LintRule]:
        return [rule for rule in self._rules.values() if rule.enabled]

    def apply_config(self, config: LocExtractConfig) -> None:
        """Apply the ``[rules]`` enable and disable lists. Disable wins."""
        only = set(config.rules.enable)
        off = set(config.rules.disable)
        for rule in self._rules.values():
            rule.enabled = (not only or rule.id in only) and rule.id not in off

    def load_custom_rules(self, directory: Path) -> int:
        """Register every rule in the YAML files under *directory*.

        Returns the number of rules loaded. A missing directory loads nothing.
        """
        if not directory.is_dir():
            return 0
        files = [p for p in sorted(directory.iterdir()) if p.suffix in _RULE_SUFFIXES]
        return sum(self._load_yaml_rules(p) for p in files)

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise RuleError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            return 0
        entries = data if isinstance(data, list) else [data]
        rules = [_rule_from_entry(entry, path) for entry in entries]
        self.register_many(rules)
        logger.debug("Loaded %d custom rule(s) from %s", len(rules), path)
        return len(rules)


def build_registry(config: LocExtractConfig, root: Path) -> RuleRegistry:
    """Built-in rules plus custom rules from *root*, filtered and precompiled."""
    from locextract.rules.builtin import fresh_builtin_rules

    registry = RuleRegistry()
    registry.register_many(fresh_builtin_rules())
    registry.load_custom_rules(root / config.rules.custom_dir)
    registry.apply_config(config)

    call_pattern = build_call_pattern(
        config.filetype.macro_prefixes, config.filetype.macro_name
    )
    for rule in registry.enabled_rules():
        try:
            rule.compiled(call_pattern)
        except re.error as exc:
            raise RuleError(f"Invalid pattern for rule {rule.id}: {exc}") from exc
    return registry
