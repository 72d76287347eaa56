"""Lint rule data model: pattern stored as a template, compiled per call pattern."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List

CALL_PLACEHOLDER = "{call}"


def build_call_pattern(prefixes: List[str], macro_name: str) -> str:
    """Regex for the start of a localization call, e.g. ``NSLocalizedString``.

    The name must sit at the start of the text or after a non-word character,
    so ``MyNSLocalizedString`` is not a match.
    """
    alternation = "|".join(re.escape(p) for p in prefixes)
    return rf"(?:^|\W)(?:{alternation}){re.escape(macro_name)}"


@dataclass
class LintRule:
    """A malformed-call detection rule.

    ``pattern`` is a raw regex string in which ``{call}`` stands for the
    configured localization call (see :func:`build_call_pattern`). The
    compiled regex is built lazily and cached per call pattern.
    """

    id: str
    name: str
    message: str
    pattern: str
    description: str = ""
    enabled: bool = True

    _compiled: Dict[str, re.Pattern[str]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def compiled(self, call_pattern: str) -> re.Pattern[str]:
        if call_pattern not in self._compiled:
            source = self.pattern.replace(CALL_PLACEHOLDER, call_pattern)
            self._compiled[call_pattern] = re.compile(source)
        return self._compiled[call_pattern]
