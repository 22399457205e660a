"""JSON output renderers.

Renders search and suggestion views into JSON-serializable objects and provides
JsonFileWriter, which accumulates results and writes one file per command.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from TagSearch.renderers.base import OutputWriter
from TagSearch.renderers.view_models import SearchView, SuggestionView
from TagSearch.utils.log import log


def render_json(search: SearchView) -> dict:
    """Render a search view into a JSON-serializable dict."""
    return {
        "query": search.query,
        "valid": search.is_valid,
        "errors": list(search.errors),
        "matching_tags": list(search.matching_tags),
        "trades": [
            {
                "id": trade.id,
                "date": trade.date,
                "currency_pair": trade.currency_pair,
                "side": trade.side,
                "status": trade.status,
                "tags": list(trade.tags),
                "highlighted_tags": list(trade.highlighted_tags),
            }
            for trade in search.trades
        ],
    }


def render_suggestions_json(view: SuggestionView) -> dict:
    return {"partial_input": view.partial_input, "suggestions": list(view.suggestions)}


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_search_result(self, search: SearchView) -> None:
        """Accumulate a search for later writing."""
        self.all_results.append(render_json(search))

    def write_suggestions(self, suggestions: SuggestionView) -> None:
        self.all_results.append(render_suggestions_json(suggestions))

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        if not self.all_results:
            return
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
