"""Tests for console and JSON output writers."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagSearch.renderers import (
    JsonFileWriter,
    MultiOutputWriter,
    SuggestionView,
    map_search_to_view,
    render_suggestions_text,
    render_text,
)
from TagSearch.services import TagSearchService
from TagSearch.storage import load_trades

FIXTURE = REPO_ROOT / "test" / "data" / "trades.json"


def _search_view(query: str):
    service = TagSearchService()
    result = service.execute_search(load_trades(FIXTURE), query)
    highlights = service.get_search_highlights(result.trades, result.matching_tags)
    return map_search_to_view(query, result, highlights)


class TestConsoleRendering(unittest.TestCase):
    def test_valid_search(self) -> None:
        text = render_text(_search_view("#breakout OR #evening"))
        self.assertIn("Query: #breakout OR #evening", text)
        self.assertIn("Tags: #breakout, #evening", text)
        self.assertIn("Matches: 1", text)
        self.assertIn("1. 5  2024-01-05  USD/CAD short closed", text)
        self.assertIn("Tags: [#breakout] [#evening]", text)

    def test_partial_highlight(self) -> None:
        text = render_text(_search_view("#swing AND NOT #afternoon"))
        self.assertIn("Tags: [#swing] #morning #trend", text)

    def test_invalid_search(self) -> None:
        text = render_text(_search_view("#a AND"))
        self.assertIn("Invalid query:", text)
        self.assertIn("  - Query cannot end with AND or OR", text)
        self.assertNotIn("Matches:", text)

    def test_suggestions(self) -> None:
        self.assertEqual(render_suggestions_text(SuggestionView("#s", ("#swing", "#scalping"))), "#swing\n#scalping\n")
        self.assertEqual(render_suggestions_text(SuggestionView("#zz", ())), "No suggestions for '#zz'\n")


class TestJsonFileWriter(unittest.TestCase):
    def test_accumulates_until_finalize(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp)
            MultiOutputWriter([writer]).write_search_result(_search_view("#scalping"))
            writer.write_suggestions(SuggestionView("#sw", ("#swing",)))
            self.assertFalse((Path(tmp) / "json").exists())

            writer.finalize("search")
            files = list((Path(tmp) / "json").glob("search_*.json"))
            self.assertEqual(len(files), 1)
            payload = json.loads(files[0].read_text(encoding="utf-8"))

        self.assertEqual(payload[0]["matching_tags"], ["#scalping"])
        self.assertEqual([trade["id"] for trade in payload[0]["trades"]], ["1", "2"])
        self.assertEqual(payload[1], {"partial_input": "#sw", "suggestions": ["#swing"]})

    def test_nothing_written_without_results(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            JsonFileWriter(tmp).finalize("search")
            self.assertFalse((Path(tmp) / "json").exists())


if __name__ == "__main__":
    unittest.main()
