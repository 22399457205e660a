"""Command implementations for TagSearch CLI.

Encapsulates business logic for each command, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from TagSearch.core.models import Trade
from TagSearch.core.query import SearchResult, ValidationResult
from TagSearch.renderers import OutputWriter, SuggestionView, map_search_to_view
from TagSearch.services import TagSearchService, TagStats, TradeSnapshot, build_tag_index, most_used_tags
from TagSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one query against the journal and hand the result to the writer."""

    search_service: TagSearchService
    snapshot: TradeSnapshot
    output_writer: OutputWriter

    def execute(self, query: str) -> SearchResult:
        log.debug("Running query=%r against %d trades", query, len(self.snapshot))
        result = self.search_service.execute_search(self.snapshot, query)
        if result.is_valid:
            log.info("Matched %d of %d trades", len(result.trades), len(self.snapshot))
        highlights = self.search_service.get_search_highlights(result.trades, result.matching_tags)
        self.output_writer.write_search_result(map_search_to_view(query, result, highlights))
        return result


@dataclass(slots=True)
class ValidateCommand:
    """Report structural problems of a query."""

    search_service: TagSearchService

    def execute(self, query: str) -> ValidationResult:
        result = self.search_service.validate_search_query(query)
        if result.is_valid:
            log.info("Query is valid: %s", query)
        else:
            log.warning("Query is invalid: %s", query)
            for error in result.errors:
                log.warning("  - %s", error)
        return result


@dataclass(slots=True)
class SuggestCommand:
    """Print completions for a partially typed query."""

    search_service: TagSearchService
    trades: Sequence[Trade]
    output_writer: OutputWriter

    def execute(self, partial_input: str, limit: int | None = None) -> list[str]:
        suggestions = self.search_service.get_suggestions(self.trades, partial_input, limit=limit)
        log.debug("Computed %d suggestions for partial=%r", len(suggestions), partial_input)
        view = SuggestionView(partial_input=partial_input, suggestions=tuple(suggestions))
        self.output_writer.write_suggestions(view)
        return suggestions


@dataclass(slots=True)
class TagsCommand:
    """Print the most used tags of the journal."""

    trades: Sequence[Trade]

    def execute(self, limit: int) -> list[TagStats]:
        top = most_used_tags(build_tag_index(self.trades), limit)
        for stats in top:
            log.info("%-24s %4d  last used %s", stats.tag, stats.count, stats.last_used or "-")
        return top
