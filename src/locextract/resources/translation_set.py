"""Translation set: ordered, key-deduplicated resource collection."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from locextract.resources.models import ResourceRecord


class TranslationSet:
    """Resources for one locale, in insertion order.

    Dedup key: ``ResourceRecord.hash_key``. Adding a record whose hash key is
    already present replaces the stored record but keeps its position.
    """

    def __init__(self, source_locale: str) -> None:
        self.source_locale = source_locale
        self._by_hash: Dict[Tuple[str, str, str, str], ResourceRecord] = {}

    def add(self, resource: ResourceRecord) -> None:
        self._by_hash[resource.hash_key] = resource

    def add_all(self, resources: Iterable[ResourceRecord]) -> None:
        for r in resources:
            self.add(r)

    def get(self, hash_key: Tuple[str, str, str, str]) -> Optional[ResourceRecord]:
        return self._by_hash.get(hash_key)

    def get_by_key(self, key: str) -> Optional[ResourceRecord]:
        """Return the first resource with *key*, whatever its project or datatype."""
        for r in self._by_hash.values():
            if r.key == key:
                return r
        return None

    def get_all(self) -> List[ResourceRecord]:
        return list(self._by_hash.values())

    def size(self) -> int:
        return len(self._by_hash)

    def is_empty(self) -> bool:
        return not self._by_hash

    def __len__(self) -> int:
        return len(self._by_hash)

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(list(self._by_hash.values()))

    def __repr__(self) -> str:
        return f"TranslationSet(source_locale={self.source_locale!r}, size={self.size()})"
