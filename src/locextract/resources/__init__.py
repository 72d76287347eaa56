"""Resource models and translation sets."""

from locextract.resources.models import ExtractResult, ResourceRecord, WarningEvent
from locextract.resources.translation_set import TranslationSet

__all__ = ["ExtractResult", "ResourceRecord", "TranslationSet", "WarningEvent"]
