"""Literal unescaping and key derivation.

The key for a string is the source string itself after unescaping. The
runtime resource bundle computes its lookup key from the same literal with
exactly these rules, so both sides must stay byte-for-byte identical. This
is not a general purpose unescaper: only backslash, apostrophe and quote
escapes are resolved, one level, left to right.
"""

from __future__ import annotations

import re
from typing import Optional

_UNESCAPES = (
    (re.compile(r"^\\\\"), ""),
    (re.compile(r"([^\\])\\\\"), r"\1"),
    (re.compile(r"^\\'"), "'"),
    (re.compile(r"([^\\])\\'"), r"\1'"),
    (re.compile(r'^\\"'), '"'),
    (re.compile(r'([^\\])\\"'), r'\1"'),
)


def unescape_string(string: Optional[str]) -> Optional[str]:
    """Return the string as it would be in memory in the target language."""
    if not string:
        return string
    unescaped = string
    for pattern, replacement in _UNESCAPES:
        unescaped = pattern.sub(replacement, unescaped)
    return unescaped


def make_key(source: Optional[str]) -> Optional[str]:
    """Key for *source*: the unescaped source string, or None if empty."""
    if not source:
        return None
    return unescape_string(source)
