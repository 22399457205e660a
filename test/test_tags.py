"""Tests for tag normalization and tag list validation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagSearch.core.models import Trade
from TagSearch.core.tags import (
    MAX_TAGS_PER_TRADE,
    TagIssue,
    TagValidationResult,
    normalize_tag,
    process_tags,
    raw_tags,
    record_tags,
    validate_tag,
    validate_tags,
)


class TestNormalizeTag(unittest.TestCase):
    def test_adds_marker_and_lowercases(self) -> None:
        self.assertEqual(normalize_tag("Scalping"), "#scalping")
        self.assertEqual(normalize_tag("  #MORNING "), "#morning")

    def test_strips_invalid_characters(self) -> None:
        self.assertEqual(normalize_tag("##news-driven!"), "#newsdriven")
        self.assertEqual(normalize_tag("#asian_session"), "#asian_session")

    def test_no_valid_body_returns_empty(self) -> None:
        for raw in ("", "   ", "#", "###", "!?-"):
            with self.subTest(raw=raw):
                self.assertEqual(normalize_tag(raw), "")

    def test_idempotent(self) -> None:
        for raw in ("Scalping", "##A-b_c", "#x1", "  tag  ", "%%%", "#Ünïcode_ok"):
            once = normalize_tag(raw)
            with self.subTest(raw=raw):
                self.assertEqual(normalize_tag(once), once)


class TestValidateTag(unittest.TestCase):
    def test_valid_tag_reports_sanitized_value(self) -> None:
        result = validate_tag("#Breakout")
        self.assertTrue(result.is_valid)
        self.assertEqual(result.sanitized_value, "#breakout")

    def test_empty_tag(self) -> None:
        result = validate_tag("  ")
        self.assertFalse(result.is_valid)
        self.assertEqual([issue.code for issue in result.errors], ["TAG_EMPTY"])

    def test_too_long_tag(self) -> None:
        result = validate_tag("#" + "a" * 51)
        self.assertFalse(result.is_valid)
        self.assertIn("TAG_TOO_LONG", [issue.code for issue in result.errors])

    def test_invalid_characters(self) -> None:
        result = validate_tag("#news-driven")
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors[0].code, "TAG_INVALID_CHARS")
        self.assertEqual(result.sanitized_value, "#newsdriven")

    def test_list_errors_are_prefixed_with_position(self) -> None:
        result = validate_tags(["#ok", "#bad tag"])
        self.assertFalse(result.is_valid)
        self.assertTrue(result.errors[0].message.startswith("Tag 2: "))

    def test_list_keeps_every_issue_of_a_tag(self) -> None:
        result = validate_tags(["#ok", "#" + "x" * 51 + "!"])
        self.assertEqual(
            result,
            TagValidationResult(
                is_valid=False,
                errors=(
                    TagIssue("TAG_TOO_LONG", "Tag 2: Tag cannot be longer than 50 characters"),
                    TagIssue("TAG_INVALID_CHARS", "Tag 2: Tag can only contain letters, numbers, and underscores"),
                ),
            ),
        )
        self.assertEqual(validate_tags(["#ok", "#fine_2"]), TagValidationResult(is_valid=True))

    def test_list_rejects_too_many_tags(self) -> None:
        result = validate_tags([f"#t{i}" for i in range(MAX_TAGS_PER_TRADE + 1)])
        self.assertEqual(result.errors[0].code, "TOO_MANY_TAGS")

    def test_list_rejects_non_list(self) -> None:
        result = validate_tags("#scalping")  # type: ignore[arg-type]
        self.assertEqual(result.errors[0].code, "TAGS_NOT_ARRAY")


class TestRecordTags(unittest.TestCase):
    def test_process_tags_deduplicates_in_order(self) -> None:
        self.assertEqual(process_tags(["Swing", "#swing", "###", "trend"]), ["#swing", "#trend"])

    def test_records_with_missing_tags(self) -> None:
        self.assertEqual(raw_tags({"id": "1"}), ())
        self.assertEqual(raw_tags({"id": "1", "tags": None}), ())
        self.assertEqual(record_tags(object()), frozenset())

    def test_object_and_mapping_records(self) -> None:
        trade = Trade(id="1", date="2024-01-01", tags=["#Scalping", "morning", "!!"])
        self.assertEqual(record_tags(trade), frozenset({"#scalping", "#morning"}))
        self.assertEqual(record_tags({"tags": "#Trend"}), frozenset({"#trend"}))


if __name__ == "__main__":
    unittest.main()
