"""Tests for field matcher strategies."""

import re
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TermMatch.core.matchers import (
    CallableMatcher,
    DisplayFieldMatcher,
    ExactFieldMatcher,
    MultiFieldMatcher,
    read_field,
)


def _pattern(text: str) -> re.Pattern[str]:
    return re.compile(re.escape(text), re.IGNORECASE)


class TestReadField(unittest.TestCase):
    def test_reads_mapping_and_attribute_records(self) -> None:
        self.assertEqual(read_field({"name": "Albany"}, "name"), "Albany")
        self.assertEqual(read_field(SimpleNamespace(name="Albany"), "name"), "Albany")

    def test_missing_and_none_read_as_empty(self) -> None:
        self.assertEqual(read_field({}, "name"), "")
        self.assertEqual(read_field({"name": None}, "name"), "")
        self.assertEqual(read_field(object(), "name"), "")

    def test_non_string_values_are_stringified(self) -> None:
        self.assertEqual(read_field({"code": 42}, "code"), "42")


class TestDisplayFieldMatcher(unittest.TestCase):
    def test_substring_anywhere_in_field(self) -> None:
        matcher = DisplayFieldMatcher("airport")
        record = {"airport": "Albany, NY", "code": "ALB"}
        self.assertTrue(matcher.test("bany", _pattern("bany"), record))
        self.assertFalse(matcher.test("or", _pattern("or"), record))

    def test_other_fields_are_ignored(self) -> None:
        matcher = DisplayFieldMatcher("airport")
        self.assertFalse(matcher.test("alb", _pattern("alb"), {"airport": "Akiak", "code": "ALB"}))

    def test_record_is_not_mutated(self) -> None:
        record = {"airport": "Albany, NY"}
        DisplayFieldMatcher("airport").test("alb", _pattern("alb"), record)
        self.assertEqual(record, {"airport": "Albany, NY"})


class TestMultiFieldMatcher(unittest.TestCase):
    def test_any_field_matches_by_default(self) -> None:
        matcher = MultiFieldMatcher(("airport", "code"))
        self.assertTrue(matcher.test("cvo", _pattern("cvo"), {"airport": "BAlbany, OR", "code": "CVO"}))

    def test_require_all_fields(self) -> None:
        matcher = MultiFieldMatcher(("airport", "code"), require_all=True)
        record = {"airport": "Albany, NY", "code": "ALB"}
        self.assertTrue(matcher.test("alb", _pattern("alb"), record))
        self.assertFalse(matcher.test("any", _pattern("any"), record))

    def test_needs_at_least_one_field(self) -> None:
        with self.assertRaises(ValueError):
            MultiFieldMatcher(())


class TestExactFieldMatcher(unittest.TestCase):
    def test_exact_value_matches_raw_term(self) -> None:
        matcher = ExactFieldMatcher("code")
        self.assertTrue(matcher.test("ALB", _pattern("ALB"), {"code": "ALB"}))
        self.assertFalse(matcher.test("AL", _pattern("AL"), {"code": "ALB"}))

    def test_case_insensitive_exact(self) -> None:
        matcher = ExactFieldMatcher("code", case_sensitive=False)
        self.assertTrue(matcher.test("alb", _pattern("alb"), {"code": "ALB"}))

    def test_fallback_is_consulted(self) -> None:
        matcher = ExactFieldMatcher("code", fallback=DisplayFieldMatcher("airport"))
        record = {"airport": "Albany, NY", "code": "ALB"}
        self.assertTrue(matcher.test("bany", _pattern("bany"), record))
        self.assertFalse(matcher.test("xyz", _pattern("xyz"), record))


class TestCallableMatcher(unittest.TestCase):
    def test_wraps_function(self) -> None:
        calls: list[str] = []

        def func(term, pattern, record):
            calls.append(term)
            return term in record["tags"]

        matcher = CallableMatcher(func)
        self.assertTrue(matcher.test("red", _pattern("red"), {"tags": ["red"]}))
        self.assertFalse(matcher.test("blue", _pattern("blue"), {"tags": ["red"]}))
        self.assertEqual(calls, ["red", "blue"])


if __name__ == "__main__":
    unittest.main()
