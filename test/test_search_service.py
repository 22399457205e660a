"""Tests for TagSearchService against the journal fixture."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagSearch.core.query import EMPTY_QUERY, AndNode, OrNode, TagNode
from TagSearch.services import SearchCache, TagSearchService, TradeSnapshot
from TagSearch.storage import load_trades

FIXTURE = REPO_ROOT / "test" / "data" / "trades.json"


def _ids(result) -> list[str]:
    return [trade.id for trade in result.trades]


class TestExecuteSearch(unittest.TestCase):
    def setUp(self) -> None:
        self.trades = load_trades(FIXTURE)
        self.service = TagSearchService()

    def test_fixture_queries(self) -> None:
        cases = {
            "#scalping": ["1", "2"],
            "#scalping AND #morning": ["1"],
            "#scalping OR #swing": ["1", "2", "3", "4"],
            "NOT #scalping": ["3", "4", "5", "6"],
            "#morning AND (#scalping OR #swing)": ["1", "3"],
            "(#scalping OR #swing) AND NOT #afternoon": ["1", "3"],
            "#SCALPING and Morning": ["1"],
        }
        for query, expected in cases.items():
            with self.subTest(query=query):
                result = self.service.execute_search(self.trades, query)
                self.assertTrue(result.is_valid)
                self.assertEqual(_ids(result), expected)

    def test_matching_tags_in_first_occurrence_order(self) -> None:
        result = self.service.execute_search(self.trades, "#swing OR (#morning AND NOT #swing)")
        self.assertEqual(result.matching_tags, ("#swing", "#morning"))

    def test_zero_matches_is_valid(self) -> None:
        result = self.service.execute_search(self.trades, "#nonexistent")
        self.assertTrue(result.is_valid)
        self.assertEqual(result.trades, ())
        self.assertEqual(result.errors, ())

    def test_invalid_query_returns_no_trades(self) -> None:
        result = self.service.execute_search(self.trades, "(#scalping AND #morning")
        self.assertFalse(result.is_valid)
        self.assertEqual(result.trades, ())
        self.assertIn("Unmatched opening parenthesis", result.errors)
        self.assertEqual(result.query, EMPTY_QUERY)

    def test_empty_query_matches_everything(self) -> None:
        result = self.service.execute_search(self.trades, "")
        self.assertTrue(result.is_valid)
        self.assertEqual(len(result.trades), len(self.trades))

    def test_mapping_records(self) -> None:
        records = [{"id": 1, "tags": ["#A", "b"]}, {"id": 2}, {"id": 3, "tags": None}]
        result = self.service.execute_search(records, "#a OR NOT #b")
        self.assertEqual([record["id"] for record in result.trades], [1, 2, 3])


class TestServiceHelpers(unittest.TestCase):
    def setUp(self) -> None:
        self.service = TagSearchService()

    def test_validate_search_query(self) -> None:
        self.assertTrue(self.service.validate_search_query("#scalping AND #morning").is_valid)
        result = self.service.validate_search_query("#scalping AND")
        self.assertFalse(result.is_valid)
        self.assertIn("Query cannot end with AND or OR", result.errors)

    def test_parse_search_query(self) -> None:
        self.assertEqual(
            self.service.parse_search_query("#scalping AND #morning OR #swing"),
            OrNode((AndNode((TagNode("#scalping"), TagNode("#morning"))), TagNode("#swing"))),
        )
        self.assertEqual(self.service.parse_search_query("#a AND"), EMPTY_QUERY)

    def test_search_highlights(self) -> None:
        trades = load_trades(FIXTURE)
        result = self.service.execute_search(trades, "#scalping OR #swing")
        highlights = self.service.get_search_highlights(result.trades, result.matching_tags)
        self.assertEqual([item.trade_id for item in highlights], ["1", "2", "3", "4"])
        self.assertEqual(highlights[0].matching_tags, ("#scalping",))
        self.assertEqual(highlights[2].matching_tags, ("#swing",))

    def test_highlights_normalize_raw_tags(self) -> None:
        highlights = self.service.get_search_highlights([{"id": 7, "tags": ["Trend", "#TREND", "#x"]}], ["#trend"])
        self.assertEqual(highlights[0].trade_id, "7")
        self.assertEqual(highlights[0].matching_tags, ("#trend",))

    def test_is_tag_search(self) -> None:
        self.assertTrue(TagSearchService.is_tag_search("#scalping"))
        self.assertTrue(TagSearchService.is_tag_search("morning and swing"))
        self.assertTrue(TagSearchService.is_tag_search("NOT breakout"))
        self.assertFalse(TagSearchService.is_tag_search("android"))
        self.assertFalse(TagSearchService.is_tag_search("brand new setup"))
        self.assertFalse(TagSearchService.is_tag_search(""))

    def test_filter_to_search_query(self) -> None:
        build = TagSearchService.filter_to_search_query
        self.assertEqual(build(["#a", "#b"], ["#c"]), "(#a AND #b) AND NOT #c")
        self.assertEqual(build(["#a", "#b"], [], mode="or"), "(#a OR #b)")
        self.assertEqual(build(["#a"], ["#b", "#c"]), "#a AND NOT #b AND NOT #c")
        self.assertEqual(build([], []), "")
        with self.assertRaises(ValueError):
            build(["#a"], [], mode="XOR")

    def test_filter_query_is_searchable(self) -> None:
        trades = load_trades(FIXTURE)
        query = TagSearchService.filter_to_search_query(["#scalping", "#swing"], ["#afternoon"], mode="OR")
        result = self.service.execute_search(trades, query)
        self.assertEqual(_ids(result), ["1", "3"])


class TestSearchCache(unittest.TestCase):
    def setUp(self) -> None:
        self.trades = load_trades(FIXTURE)
        self.cache = SearchCache(max_entries=2)
        self.service = TagSearchService(cache=self.cache)

    def test_versioned_snapshot_hits_cache(self) -> None:
        snapshot = TradeSnapshot.from_records(self.trades, version=1)
        first = self.service.execute_search(snapshot, "#scalping")
        second = self.service.execute_search(snapshot, "  #scalping ")
        self.assertIs(first, second)
        self.assertEqual(self.cache.hits, 1)
        self.assertEqual(self.cache.misses, 1)

    def test_new_version_misses(self) -> None:
        self.service.execute_search(TradeSnapshot.from_records(self.trades, version=1), "#swing")
        result = self.service.execute_search(TradeSnapshot.from_records(self.trades[:3], version=2), "#swing")
        self.assertEqual(_ids(result), ["3"])
        self.assertEqual(self.cache.hits, 0)
        self.assertEqual(len(self.cache), 2)

    def test_unversioned_input_bypasses_cache(self) -> None:
        self.service.execute_search(self.trades, "#swing")
        self.service.execute_search(TradeSnapshot.from_records(self.trades), "#swing")
        self.assertEqual(len(self.cache), 0)

    def test_eviction_and_clear(self) -> None:
        snapshot = TradeSnapshot.from_records(self.trades, version="v1")
        for query in ("#a", "#b", "#c"):
            self.service.execute_search(snapshot, query)
        self.assertEqual(len(self.cache), 2)
        self.assertIsNone(self.cache.get(("#a", "v1")))

        self.cache.clear()
        self.assertEqual(len(self.cache), 0)
        self.assertEqual(self.cache.hits, 0)
        self.assertEqual(self.cache.misses, 0)

    def test_max_entries_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            SearchCache(max_entries=0)


if __name__ == "__main__":
    unittest.main()
