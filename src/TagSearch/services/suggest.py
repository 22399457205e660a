"""Tag suggestion ranking for query autocomplete.

`suggest` completes a partially typed query from a tag frequency index:

- empty input lists the most used tags;
- input ending in an operator (or an opening parenthesis) is re-emitted with
  each top tag not yet in the query appended;
- otherwise the last word is completed, prefix matches first, then
  substring matches; an exact match is just another prefix match.

Within every tier tags are ordered by count, then recency, then name.
`contextual_suggestions` is the separate heuristic used when tagging a trade.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, AbstractSet, Iterable, Sequence

from TagSearch.core.query import TokenType
from TagSearch.core.tags import TAG_MARKER, normalize_tag, record_tags
from TagSearch.query.tokenizer import tokenize
from TagSearch.services.index import TagFrequencyIndex, TagStats, rank_key, record_field

_EXPECTS_TAG = frozenset({TokenType.AND, TokenType.OR, TokenType.NOT, TokenType.LPAREN})

_MAJOR_PAIRS = frozenset({"EUR/USD", "GBP/USD", "USD/JPY", "USD/CHF", "AUD/USD", "USD/CAD", "NZD/USD"})
_EXOTIC_PAIRS = frozenset({"USD/ZAR", "USD/TRY", "USD/MXN", "EUR/TRY", "GBP/ZAR"})
_SIMILARITY_THRESHOLD = 4


@dataclass(frozen=True, slots=True)
class SuggestionContext:
    """Optional context for suggestions.

    Attributes:
        current_trade: Trade being edited; its tags are not suggested again.
    """

    current_trade: Any | None = None


@dataclass(frozen=True, slots=True)
class TagSuggestion:
    """A scored tag suggestion with the reason it was proposed."""

    tag: str
    score: float
    reason: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class ContextRule:
    """Rule proposing tags when a trade matches a condition."""

    id: str
    name: str
    condition: Callable[[Any], bool]
    suggested_tags: tuple[str, ...]
    priority: int


def suggest(
    partial_input: str,
    index: TagFrequencyIndex,
    context: SuggestionContext | None = None,
    limit: int = 5,
) -> list[str]:
    """Return ranked completions for a partially typed query.

    Args:
        partial_input: Query text typed so far.
        index: Tag frequency index of the current record collection.
        context: Optional editing context.
        limit: Maximum number of completions.

    Returns:
        Completion strings, best first. Never raises for odd input.
    """
    if limit <= 0 or not index:
        return []

    excluded = _context_tags(context)
    text = partial_input or ""
    if not text.strip():
        return [stats.tag for stats in _ranked(index.values(), excluded)[:limit]]

    stripped = text.rstrip()
    last_chunk = stripped.split()[-1]
    last_tokens = tokenize(last_chunk)

    if last_tokens and last_tokens[-1].type in _EXPECTS_TAG:
        referenced = {token.value for token in tokenize(text) if token.type is TokenType.TAG}
        candidates = _ranked(index.values(), excluded | referenced)[:limit]
        separator = "" if stripped.endswith("(") else " "
        return [f"{stripped}{separator}{stats.tag}" for stats in candidates]

    if last_chunk.endswith(")"):
        return []

    head = stripped[: len(stripped) - len(last_chunk)]
    term = last_chunk.lstrip("(")
    lead = last_chunk[: len(last_chunk) - len(term)]
    prefix = f"{head}{lead}"

    needle = normalize_tag(term)
    if not needle:
        candidates = _ranked(index.values(), excluded)[:limit]
    else:
        candidates = _match_tiers(index.values(), needle[len(TAG_MARKER):], excluded)[:limit]
    return [f"{prefix}{stats.tag}" for stats in candidates]


def _context_tags(context: SuggestionContext | None) -> frozenset[str]:
    if context is None or context.current_trade is None:
        return frozenset()
    return record_tags(context.current_trade)


def _ranked(entries: Iterable[TagStats], excluded: AbstractSet[str | None]) -> list[TagStats]:
    return sorted((stats for stats in entries if stats.tag not in excluded), key=rank_key)


def _match_tiers(entries: Iterable[TagStats], body: str, excluded: AbstractSet[str]) -> list[TagStats]:
    tiered: list[tuple[int, TagStats]] = []
    for stats in entries:
        if stats.tag in excluded:
            continue
        tag_body = stats.tag[len(TAG_MARKER):]
        if tag_body.startswith(body):
            tier = 0
        elif body in tag_body:
            tier = 1
        else:
            continue
        tiered.append((tier, stats))
    tiered.sort(key=lambda item: (item[0], *rank_key(item[1])))
    return [stats for _, stats in tiered]


def _strategy_contains(keyword: str) -> Callable[[Any], bool]:
    return lambda trade: keyword in str(record_field(trade, "strategy") or "").lower()


def _number(trade: Any, name: str) -> float:
    value = record_field(trade, name)
    try:
        return float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


DEFAULT_RULES: tuple[ContextRule, ...] = (
    ContextRule(
        "asian_session",
        "Asian Trading Session",
        lambda trade: record_field(trade, "session") == "asian",
        ("#asian_session", "#low_volatility", "#range_trading"),
        70,
    ),
    ContextRule(
        "us_session",
        "US Trading Session",
        lambda trade: record_field(trade, "session") == "us",
        ("#us_session", "#high_volatility", "#news_driven"),
        70,
    ),
    ContextRule(
        "european_session",
        "European Trading Session",
        lambda trade: record_field(trade, "session") == "european",
        ("#european_session", "#trend_following"),
        70,
    ),
    ContextRule(
        "major_pairs",
        "Major Currency Pairs",
        lambda trade: record_field(trade, "currency_pair") in _MAJOR_PAIRS,
        ("#major_pair", "#tight_spreads", "#high_liquidity"),
        60,
    ),
    ContextRule(
        "exotic_pairs",
        "Exotic Currency Pairs",
        lambda trade: record_field(trade, "currency_pair") in _EXOTIC_PAIRS,
        ("#exotic_pair", "#wide_spreads", "#volatile"),
        60,
    ),
    ContextRule(
        "long_position",
        "Long Position",
        lambda trade: record_field(trade, "side") == "long",
        ("#bullish", "#long_bias"),
        50,
    ),
    ContextRule(
        "short_position",
        "Short Position",
        lambda trade: record_field(trade, "side") == "short",
        ("#bearish", "#short_bias"),
        50,
    ),
    ContextRule(
        "high_leverage",
        "High Leverage Trade",
        lambda trade: _number(trade, "leverage") > 50,
        ("#high_leverage", "#high_risk", "#scalping"),
        80,
    ),
    ContextRule(
        "large_position",
        "Large Position Size",
        lambda trade: _number(trade, "lot_size") > 1,
        ("#large_position", "#swing_trade", "#high_conviction"),
        75,
    ),
    ContextRule(
        "breakout_strategy",
        "Breakout Strategy",
        _strategy_contains("breakout"),
        ("#breakout", "#momentum", "#volatility_expansion"),
        85,
    ),
    ContextRule(
        "scalping_strategy",
        "Scalping Strategy",
        _strategy_contains("scalp"),
        ("#scalping", "#quick_profit", "#tight_stops"),
        85,
    ),
    ContextRule(
        "swing_strategy",
        "Swing Trading Strategy",
        _strategy_contains("swing"),
        ("#swing_trade", "#multi_day", "#trend_following"),
        85,
    ),
)

_SIMILARITY_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("currency_pair", 3),
    ("session", 2),
    ("side", 2),
    ("strategy", 3),
    ("timeframe", 2),
)


def contextual_suggestions(
    current_trade: Any,
    records: Sequence[Any],
    limit: int = 10,
    *,
    rules: Sequence[ContextRule] = DEFAULT_RULES,
) -> list[TagSuggestion]:
    """Suggest tags for a trade from its attributes and from similar trades.

    Rule suggestions score their rule priority; tags seen on similar trades
    score ten points per occurrence. Duplicates keep their best score and
    tags already on the trade are skipped.
    """
    if limit <= 0:
        return []

    suggestions: list[TagSuggestion] = []
    for rule in rules:
        if rule.condition(current_trade):
            suggestions.extend(
                TagSuggestion(tag=normalize_tag(tag), score=rule.priority, reason="contextual_match", context=rule.name)
                for tag in rule.suggested_tags
            )

    frequency: dict[str, int] = {}
    for trade in _similar_trades(current_trade, records):
        for tag in record_tags(trade):
            frequency[tag] = frequency.get(tag, 0) + 1
    suggestions.extend(
        TagSuggestion(tag=tag, score=count * 10, reason="contextual_match", context="Similar trades")
        for tag, count in frequency.items()
    )

    existing = record_tags(current_trade)
    best: dict[str, TagSuggestion] = {}
    for suggestion in suggestions:
        if not suggestion.tag or suggestion.tag in existing:
            continue
        current = best.get(suggestion.tag)
        if current is None or suggestion.score > current.score:
            best[suggestion.tag] = suggestion

    return sorted(best.values(), key=lambda item: (-item.score, item.tag))[:limit]


def _similar_trades(current_trade: Any, records: Sequence[Any]) -> list[Any]:
    current_id = record_field(current_trade, "id")
    similar: list[Any] = []
    for trade in records:
        if current_id is not None and record_field(trade, "id") == current_id:
            continue
        score = 0
        for name, weight in _SIMILARITY_WEIGHTS:
            value = record_field(current_trade, name)
            if value is not None and record_field(trade, name) == value:
                score += weight
        if score >= _SIMILARITY_THRESHOLD:
            similar.append(trade)
    return similar
