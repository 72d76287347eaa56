"""Built-in lint rules."""

import dataclasses

from locextract.rules.builtin.calls import ALL_CALL_RULES
from locextract.rules.models import LintRule

ALL_BUILTIN_RULES: list[LintRule] = [*ALL_CALL_RULES]


def fresh_builtin_rules() -> list[LintRule]:
    """Copies of the built-in rules, each with its own compiled-pattern cache."""
    return [dataclasses.replace(r) for r in ALL_BUILTIN_RULES]


__all__ = ["ALL_BUILTIN_RULES", "fresh_builtin_rules"]
