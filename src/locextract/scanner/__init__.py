"""Scanner: literal normalizer and localization call engine."""

from locextract.scanner.engine import ScanContext, ScanOutcome, extract_comment, scan, sweep
from locextract.scanner.normalizer import make_key, unescape_string

__all__ = [
    "ScanContext",
    "ScanOutcome",
    "extract_comment",
    "make_key",
    "scan",
    "sweep",
    "unescape_string",
]
