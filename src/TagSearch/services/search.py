"""Tag search service: the public entry point of the query engine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from TagSearch.core.query import (
    EMPTY_QUERY,
    QueryNode,
    SearchHighlight,
    SearchResult,
    ValidationResult,
)
from TagSearch.core.tags import normalize_tag, raw_tags
from TagSearch.query import QuerySyntaxError, evaluate, parse, referenced_tags, tokenize, validate
from TagSearch.services.cache import SearchCache
from TagSearch.services.index import TagFrequencyIndex, TradeSnapshot, build_tag_index, record_field
from TagSearch.services.suggest import SuggestionContext, suggest
from TagSearch.utils.log import log

_KEYWORD_RE = re.compile(r"\b(and|or|not)\b", re.IGNORECASE)
_FILTER_MODES = frozenset({"AND", "OR"})


@dataclass(slots=True)
class TagSearchService:
    """Stateless tag query engine with an optional caller-owned cache.

    Results are cached only when `execute_search` receives a `TradeSnapshot`
    carrying a version, so plain record lists are always evaluated fresh.
    """

    cache: SearchCache | None = None
    default_limit: int = 5

    def parse_search_query(self, query: str) -> QueryNode:
        """Parse a query string into an expression tree.

        Malformed queries yield `EMPTY_QUERY` instead of raising; use
        `validate_search_query` to obtain the reasons.
        """
        tokens = tokenize(query)
        try:
            return parse(tokens)
        except QuerySyntaxError as error:
            log.debug("Query parse failed: query=%r error=%s", query, error)
            return EMPTY_QUERY

    def validate_search_query(self, query: str) -> ValidationResult:
        """Validate the structure of a query string."""
        return validate(tokenize(query))

    def execute_search(self, records: Iterable[Any] | TradeSnapshot, query: str) -> SearchResult:
        """Run a query against a record collection.

        Args:
            records: Records exposing `tags`, or a prebuilt snapshot.
            query: Query text.

        Returns:
            Search result; invalid queries produce `is_valid=False` and no trades.
        """
        snapshot = records if isinstance(records, TradeSnapshot) else TradeSnapshot.from_records(records)
        if self.cache is None or snapshot.version is None:
            return self._run(snapshot, query)

        cache_key = (query.strip(), snapshot.version)
        cached = self.cache.get(cache_key)
        if cached is not None:
            log.debug("Search cache hit: query=%r version=%r", cache_key[0], cache_key[1])
            return cached

        result = self._run(snapshot, query)
        self.cache.put(cache_key, result)
        return result

    def _run(self, snapshot: TradeSnapshot, query: str) -> SearchResult:
        tokens = tokenize(query)
        validation = validate(tokens)
        if not validation.is_valid:
            log.debug("Query rejected: query=%r errors=%s", query, list(validation.errors))
            return SearchResult(is_valid=False, errors=validation.errors)

        try:
            tree = parse(tokens)
        except QuerySyntaxError as error:
            log.debug("Query parse failed: query=%r error=%s", query, error)
            return SearchResult(is_valid=False, errors=(str(error),))

        matches = tuple(
            record for record, tags in zip(snapshot.records, snapshot.tag_sets) if evaluate(tree, tags)
        )
        log.debug("Query matched %d/%d records: query=%r", len(matches), len(snapshot), query)
        return SearchResult(
            is_valid=True,
            trades=matches,
            matching_tags=tuple(referenced_tags(tree)),
            query=tree,
        )

    def get_search_highlights(self, trades: Iterable[Any], matching_tags: Sequence[str]) -> list[SearchHighlight]:
        """Return, per trade, its own tags that appear in `matching_tags`."""
        wanted = {normalize_tag(tag) for tag in matching_tags}
        highlights: list[SearchHighlight] = []
        for trade in trades:
            own: dict[str, None] = {}
            for tag in map(normalize_tag, raw_tags(trade)):
                if tag and tag in wanted:
                    own.setdefault(tag, None)
            highlights.append(SearchHighlight(trade_id=str(record_field(trade, "id")), matching_tags=tuple(own)))
        return highlights

    def suggest(
        self,
        partial_input: str,
        index: TagFrequencyIndex,
        context: SuggestionContext | None = None,
        limit: int | None = None,
    ) -> list[str]:
        """Complete a partial query from a prebuilt tag index."""
        return suggest(partial_input, index, context, self.default_limit if limit is None else limit)

    def get_suggestions(
        self,
        records: Iterable[Any] | TradeSnapshot,
        partial_input: str,
        limit: int | None = None,
    ) -> list[str]:
        """Complete a partial query, building the tag index from `records`."""
        return self.suggest(partial_input, build_tag_index(records), limit=limit)

    @staticmethod
    def is_tag_search(text: str) -> bool:
        """Return True when text looks like tag query syntax rather than free text."""
        if not text:
            return False
        return "#" in text or _KEYWORD_RE.search(text) is not None

    @staticmethod
    def filter_to_search_query(include_tags: Sequence[str], exclude_tags: Sequence[str], mode: str = "AND") -> str:
        """Convert an include/exclude tag filter into query syntax.

        Args:
            include_tags: Tags joined by `mode`, grouped when more than one.
            exclude_tags: Tags each rendered as ``NOT <tag>``.
            mode: ``"AND"`` or ``"OR"``.

        Returns:
            Query string; parts joined by ``AND``.

        Raises:
            ValueError: If mode is not AND/OR.
        """
        mode = mode.upper()
        if mode not in _FILTER_MODES:
            raise ValueError(f"mode must be one of {sorted(_FILTER_MODES)}")

        parts: list[str] = []
        if len(include_tags) == 1:
            parts.append(include_tags[0])
        elif include_tags:
            parts.append("(" + f" {mode} ".join(include_tags) + ")")
        parts.extend(f"NOT {tag}" for tag in exclude_tags)
        return " AND ".join(parts)
