"""Tests for expression tree evaluation and rendering."""

import sys
import unittest
from itertools import product
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagSearch.core.query import AndNode, NotNode, OrNode, TagNode
from TagSearch.query import evaluate, parse, referenced_tags, to_query_string, tokenize

A = TagNode("#a")
B = TagNode("#b")


class TestEvaluate(unittest.TestCase):
    def test_truth_table(self) -> None:
        for has_a, has_b in product((False, True), repeat=2):
            tags = {tag for tag, present in (("#a", has_a), ("#b", has_b)) if present}
            with self.subTest(tags=sorted(tags)):
                self.assertEqual(evaluate(A, tags), has_a)
                self.assertEqual(evaluate(AndNode((A, B)), tags), has_a and has_b)
                self.assertEqual(evaluate(OrNode((A, B)), tags), has_a or has_b)
                self.assertEqual(evaluate(NotNode((A,)), tags), not has_a)
                self.assertEqual(
                    evaluate(OrNode((AndNode((A, NotNode((B,)))), NotNode((A,)))), tags),
                    (has_a and not has_b) or not has_a,
                )

    def test_vacuous_nodes(self) -> None:
        self.assertTrue(evaluate(AndNode(()), set()))
        self.assertTrue(evaluate(AndNode(()), {"#a"}))
        self.assertFalse(evaluate(OrNode(()), {"#a"}))

    def test_untagged_record(self) -> None:
        self.assertFalse(evaluate(A, frozenset()))
        self.assertTrue(evaluate(NotNode((A,)), frozenset()))

    def test_unknown_node_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            evaluate("#a", {"#a"})  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            evaluate(AndNode((A, "#b")), {"#a"})  # type: ignore[arg-type]


class TestTreeHelpers(unittest.TestCase):
    def test_referenced_tags_first_occurrence_order(self) -> None:
        node = parse(tokenize("#b AND (#a OR #b) AND NOT #c OR #a"))
        self.assertEqual(referenced_tags(node), ["#b", "#a", "#c"])
        self.assertEqual(referenced_tags(AndNode(())), [])

    def test_to_query_string_round_trips(self) -> None:
        for query in (
            "#a",
            "NOT #a",
            "#a AND #b AND #c",
            "#a AND #b OR #c",
            "#a AND (#b OR #c)",
            "(#a OR #b) AND NOT #c",
            "#a OR (#b OR #c)",
        ):
            node = parse(tokenize(query))
            with self.subTest(query=query):
                self.assertEqual(parse(tokenize(to_query_string(node))), node)

    def test_to_query_string_rendering(self) -> None:
        self.assertEqual(to_query_string(AndNode((A, OrNode((B, TagNode("#c")))))), "#a AND (#b OR #c)")
        self.assertEqual(to_query_string(OrNode((AndNode((A, B)), TagNode("#c")))), "#a AND #b OR #c")

    def test_empty_query_renders_empty(self) -> None:
        self.assertEqual(to_query_string(AndNode(())), "")
        self.assertEqual(parse(tokenize(to_query_string(parse(tokenize(""))))), AndNode(()))

    def test_empty_nested_groups_are_rejected(self) -> None:
        for node in (
            OrNode(()),
            OrNode((AndNode(()), A)),
            AndNode((A, OrNode(()))),
            NotNode((AndNode(()),)),
        ):
            with self.subTest(node=node):
                with self.assertRaises(ValueError):
                    to_query_string(node)


if __name__ == "__main__":
    unittest.main()
