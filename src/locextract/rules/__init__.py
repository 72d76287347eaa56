"""Lint rules: models, registry, built-in rules."""

from locextract.rules.models import LintRule, build_call_pattern
from locextract.rules.registry import RuleError, RuleRegistry, build_registry

__all__ = ["LintRule", "RuleError", "RuleRegistry", "build_call_pattern", "build_registry"]
