"""TagSearch: boolean tag queries over trading journal records.

Typical use::

    from TagSearch import TagSearchService

    service = TagSearchService()
    result = service.execute_search(trades, "#morning AND (#scalping OR #swing)")
"""

from __future__ import annotations

from TagSearch.core.query import (
    AndNode,
    NotNode,
    OrNode,
    QueryNode,
    SearchHighlight,
    SearchResult,
    TagNode,
    Token,
    TokenType,
    ValidationResult,
)
from TagSearch.core.tags import normalize_tag
from TagSearch.services import (
    SearchCache,
    SuggestionContext,
    TagSearchService,
    TagStats,
    TradeSnapshot,
    build_tag_index,
)

__version__ = "0.1.0"

__all__ = [
    "AndNode",
    "NotNode",
    "OrNode",
    "QueryNode",
    "SearchCache",
    "SearchHighlight",
    "SearchResult",
    "SuggestionContext",
    "TagNode",
    "TagSearchService",
    "TagStats",
    "Token",
    "TokenType",
    "TradeSnapshot",
    "ValidationResult",
    "build_tag_index",
    "normalize_tag",
]
