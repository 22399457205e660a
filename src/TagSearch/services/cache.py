"""Caller-owned cache for search results."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Hashable

from TagSearch.core.query import SearchResult
from TagSearch.utils.log import log

CacheKey = tuple[str, Hashable]


@dataclass(slots=True)
class SearchCache:
    """Bounded LRU cache of search results keyed on (query, snapshot version).

    The cache never detects collection changes on its own: callers must use
    a new snapshot version, or call `clear`, after mutating their records.
    """

    max_entries: int = 256
    hits: int = 0
    misses: int = 0
    _entries: OrderedDict[CacheKey, SearchResult] = field(default_factory=OrderedDict)

    def __post_init__(self) -> None:
        if self.max_entries <= 0:
            raise ValueError("max_entries must be positive")

    def get(self, key: CacheKey) -> SearchResult | None:
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return result

    def put(self, key: CacheKey, result: SearchResult) -> None:
        self._entries[key] = result
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("Search cache evicted query=%r version=%r", evicted[0], evicted[1])

    def clear(self) -> None:
        """Drop every cached result and reset statistics."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)
