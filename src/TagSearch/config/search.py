"""Search domain configuration (suggestions and result caching)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TagSearch.config.common import ConfigSection, require_positive


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search engine settings.

    Attributes:
        suggestion_limit: Default number of autocomplete entries.
        cache_enabled: Whether the CLI gives the service a result cache.
        cache_max_entries: LRU bound of that cache.
    """

    suggestion_limit: int = 5
    cache_enabled: bool = True
    cache_max_entries: int = 256


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Read the optional ``search`` section, falling back to `SearchConfig` defaults.

    Raises:
        TypeError: If a value has the wrong type.
    """
    section = ConfigSection.of(raw, "search", required=False)
    defaults = SearchConfig()
    return SearchConfig(
        suggestion_limit=section.get_int("suggestion_limit", defaults.suggestion_limit),
        cache_enabled=section.get_bool("cache_enabled", defaults.cache_enabled),
        cache_max_entries=section.get_int("cache_max_entries", defaults.cache_max_entries),
    )


def check_search(config: SearchConfig) -> None:
    """Raise ValueError when a limit is not positive."""
    require_positive(config.suggestion_limit, "search.suggestion_limit")
    require_positive(config.cache_max_entries, "search.cache_max_entries")
