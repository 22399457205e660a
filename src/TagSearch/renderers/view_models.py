"""View models for output rendering.

Separate display concerns from the journal `Trade` model and from raw
mapping records. Used by OutputWriter implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class TradeView:
    """Trade view model for output rendering.

    Attributes:
        id: Trade identifier.
        date: Trade date string ("" when unknown).
        currency_pair: Instrument or None.
        side: "long"/"short" or None.
        status: "open"/"closed" or None.
        tags: Canonical tags of the trade, in record order.
        highlighted_tags: Subset of `tags` referenced by the query.
    """

    id: str
    date: str
    currency_pair: str | None
    side: str | None
    status: str | None
    tags: Sequence[str]
    highlighted_tags: Sequence[str]


@dataclass(frozen=True, slots=True)
class SearchView:
    """A rendered search: the query, its outcome and the matching trades."""

    query: str
    is_valid: bool
    errors: Sequence[str]
    matching_tags: Sequence[str]
    trades: Sequence[TradeView]


@dataclass(frozen=True, slots=True)
class SuggestionView:
    """Completions offered for a partially typed query."""

    partial_input: str
    suggestions: Sequence[str]
