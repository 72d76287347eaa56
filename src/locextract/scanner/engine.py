"""Localization call scanner.

Finds every ``<PREFIX>LocalizedString(@"source", ...)`` call in a source
text, turns each into a :class:`ResourceRecord`, then runs the lint rules
over the same text to report malformed calls. All match cursors are local
to the functions below; nothing is shared between calls or sweeps.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Iterator, List, Optional, Sequence

from locextract.resources.models import ResourceRecord, WarningEvent
from locextract.resources.translation_set import TranslationSet
from locextract.rules.models import LintRule
from locextract.scanner.normalizer import make_key, unescape_string

logger = logging.getLogger(__name__)

_CALL_SUFFIX = r'\s*\(\s*@"(?P<source>(\\"|[^"])*)"\s*,'

# Trailing comment: a literal right after the comma that closes the call on the same line
_COMMENT_RE = re.compile(r'\s*(@"(?P<comment>(\\"|[^"])*)")\s*\)')


@lru_cache(maxsize=32)
def _call_regex(call_pattern: str) -> re.Pattern[str]:
    return re.compile(call_pattern + _CALL_SUFFIX)


@dataclass(frozen=True)
class ScanContext:
    """Everything the scanner needs to know about the file being scanned."""

    project_id: str
    source_locale: str
    datatype: str
    call_pattern: str
    path_name: Optional[str] = None
    rules: Sequence[LintRule] = ()
    new_resource: Callable[..., ResourceRecord] = ResourceRecord


@dataclass
class ScanOutcome:
    resources: TranslationSet
    warnings: List[WarningEvent] = field(default_factory=list)


def iter_calls(text: str, call_pattern: str) -> Iterator[re.Match[str]]:
    """Yield successive localization call matches in textual order."""
    return _call_regex(call_pattern).finditer(text)


def extract_comment(text: str, end: int) -> Optional[str]:
    """Return the raw comment literal that starts at *end* and closes the call.

    Only the rest of the current line is considered. A later literal on the
    same line, such as another call's argument, is never taken as the comment.
    """
    last = text.find("\n", end)
    if last == -1:
        last = len(text)
    m = _COMMENT_RE.match(text, end, last)
    return m.group("comment") if m else None


def _line_no(text: str, match: re.Match[str]) -> int:
    # The call pattern may consume the preceding non-word character (often a newline)
    matched = match.group(0)
    start = match.start() + (len(matched) - len(matched.lstrip()))
    return text.count("\n", 0, start) + 1


def sweep(
    text: str,
    rule: LintRule,
    call_pattern: str,
    path_name: Optional[str] = None,
) -> List[WarningEvent]:
    """Report every match of *rule* in *text*."""
    return [
        WarningEvent(
            rule_id=rule.id,
            message=rule.message,
            matched_text=m.group(0),
            path_name=path_name,
            line_no=_line_no(text, m),
        )
        for m in rule.compiled(call_pattern).finditer(text)
    ]


def scan(text: Optional[str], context: ScanContext) -> ScanOutcome:
    """Extract resources from *text* and lint it. Empty text yields nothing."""
    outcome = ScanOutcome(resources=TranslationSet(context.source_locale))
    if not text:
        return outcome

    index = 0
    for match in iter_calls(text, context.call_pattern):
        raw = match.group("source")
        if not raw.strip():
            continue

        key = make_key(raw)
        comment = extract_comment(text, match.end())
        logger.debug("Found string key: %s, string: '%s', comment: %s", key, raw, comment)

        outcome.resources.add(
            context.new_resource(
                res_type="string",
                project=context.project_id,
                key=key,
                source_locale=context.source_locale,
                source=unescape_string(raw),
                auto_key=True,
                path_name=context.path_name,
                state="new",
                comment=unescape_string(comment) if comment else None,
                datatype=context.datatype,
                index=index,
            )
        )
        index += 1

    for rule in context.rules:
        outcome.warnings.extend(sweep(text, rule, context.call_pattern, context.path_name))

    return outcome
