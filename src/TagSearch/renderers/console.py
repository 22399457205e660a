"""Console text output renderers.

Renders a `SearchView` into human-friendly text. Highlighted tags are
wrapped in brackets.
"""

from __future__ import annotations

from TagSearch.renderers.base import OutputWriter
from TagSearch.renderers.view_models import SearchView, SuggestionView, TradeView
from TagSearch.utils.log import log


def _fmt_tags(view: TradeView) -> str:
    highlighted = set(view.highlighted_tags)
    if not view.tags:
        return "-"
    return " ".join(f"[{tag}]" if tag in highlighted else tag for tag in view.tags)


def render_text(search: SearchView) -> str:
    """Render a search view into a text block ready to be printed."""
    lines: list[str] = [f"Query: {search.query}"]
    if not search.is_valid:
        lines.append("Invalid query:")
        lines.extend(f"  - {error}" for error in search.errors)
        return "\n".join(lines) + "\n"

    lines.append(f"Tags: {', '.join(search.matching_tags) or '-'}")
    lines.append(f"Matches: {len(search.trades)}")
    for idx, trade in enumerate(search.trades, start=1):
        details = " ".join(part for part in (trade.currency_pair, trade.side, trade.status) if part)
        lines.append(f"{idx}. {trade.id}  {trade.date or '-'}  {details}".rstrip())
        lines.append(f"   Tags: {_fmt_tags(trade)}")
    return "\n".join(lines) + "\n"


def render_suggestions_text(view: SuggestionView) -> str:
    """Render completions one per line, or a notice when there are none."""
    if not view.suggestions:
        return f"No suggestions for {view.partial_input!r}\n"
    return "".join(f"{suggestion}\n" for suggestion in view.suggestions)


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_search_result(self, search: SearchView) -> None:
        for line in render_text(search).splitlines():
            log.info(line)

    def write_suggestions(self, suggestions: SuggestionView) -> None:
        for line in render_suggestions_text(suggestions).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
