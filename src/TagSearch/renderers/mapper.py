"""Map search results to display view models."""

from __future__ import annotations

from typing import Any

from TagSearch.core.query import SearchHighlight, SearchResult
from TagSearch.core.tags import normalize_tag, raw_tags
from TagSearch.renderers.view_models import SearchView, TradeView
from TagSearch.services.index import record_field


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def map_trade_to_view(trade: Any, highlight: SearchHighlight | None = None) -> TradeView:
    """Map one record (object or mapping) to a `TradeView`."""
    tags: dict[str, None] = {}
    for tag in map(normalize_tag, raw_tags(trade)):
        if tag:
            tags.setdefault(tag, None)
    return TradeView(
        id=str(record_field(trade, "id")),
        date=str(record_field(trade, "date") or ""),
        currency_pair=_optional_str(record_field(trade, "currency_pair")),
        side=_optional_str(record_field(trade, "side")),
        status=_optional_str(record_field(trade, "status")),
        tags=tuple(tags),
        highlighted_tags=highlight.matching_tags if highlight else (),
    )


def map_search_to_view(query: str, result: SearchResult, highlights: list[SearchHighlight]) -> SearchView:
    """Map a search result and its per-trade highlights to a `SearchView`.

    `highlights` must be aligned with `result.trades`.
    """
    return SearchView(
        query=query,
        is_valid=result.is_valid,
        errors=tuple(result.errors),
        matching_tags=tuple(result.matching_tags),
        trades=tuple(
            map_trade_to_view(trade, highlight) for trade, highlight in zip(result.trades, highlights)
        ),
    )
