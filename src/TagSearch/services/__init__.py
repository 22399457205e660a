"""Service layer for TagSearch.

Exposes the search service, tag index helpers, and a factory building the
service from application configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from TagSearch.services.cache import SearchCache
from TagSearch.services.index import TagStats, TradeSnapshot, build_tag_index, most_used_tags
from TagSearch.services.search import TagSearchService
from TagSearch.services.suggest import SuggestionContext, contextual_suggestions, suggest

if TYPE_CHECKING:
    from TagSearch.config import AppConfig


def create_search_service(config: AppConfig) -> TagSearchService:
    """Create a search service from configuration.

    Args:
        config: Application configuration containing search settings.

    Returns:
        Configured TagSearchService instance.
    """
    cache = SearchCache(max_entries=config.search.cache_max_entries) if config.search.cache_enabled else None
    return TagSearchService(cache=cache, default_limit=config.search.suggestion_limit)


__all__ = [
    "SearchCache",
    "SuggestionContext",
    "TagSearchService",
    "TagStats",
    "TradeSnapshot",
    "build_tag_index",
    "contextual_suggestions",
    "create_search_service",
    "most_used_tags",
    "suggest",
]
