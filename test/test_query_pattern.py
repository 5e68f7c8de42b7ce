"""Tests for query tokenization and literal pattern building."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TermMatch.core.pattern import DEFAULT_ESCAPE_CHARS, PatternError, compile_pattern, escape
from TermMatch.core.query import tokenize


class TestTokenize(unittest.TestCase):
    def test_splits_on_whitespace_runs(self) -> None:
        self.assertEqual(tokenize("albany  or\tny\n"), ("albany", "or", "ny"))

    def test_empty_and_blank_queries_have_no_terms(self) -> None:
        self.assertEqual(tokenize(""), ())
        self.assertEqual(tokenize("   \t "), ())

    def test_leading_whitespace_yields_no_empty_term(self) -> None:
        terms = tokenize("  al  ")
        self.assertEqual(terms, ("al",))
        self.assertNotIn("", terms)

    def test_join_matches_whitespace_normalized_query(self) -> None:
        for query in ("a b", "  a   b  c ", "", "single", "x y z"):
            with self.subTest(query=query):
                self.assertEqual(" ".join(tokenize(query)), " ".join(query.split()))


class TestEscape(unittest.TestCase):
    def test_escapes_default_metacharacters(self) -> None:
        self.assertEqual(escape("a(b"), "a\\(b")
        self.assertEqual(escape("[x]{1}"), "\\[x\\]\\{1\\}")
        self.assertEqual(escape("c\\d"), "c\\\\d")

    def test_plain_text_is_unchanged(self) -> None:
        self.assertEqual(escape("Albany, OR"), "Albany, OR")

    def test_custom_escape_set(self) -> None:
        self.assertEqual(escape("a(b).c", frozenset("(")), "a\\(b).c")

    def test_letters_in_escape_set_stay_literal(self) -> None:
        escaped = escape("dallas", frozenset("d"))
        self.assertIsNotNone(compile_pattern(escaped, case_sensitive=False).search("Dallas"))
        self.assertIsNone(compile_pattern(escaped, case_sensitive=False).search("7allas"))

    def test_default_set_covers_bracket_family(self) -> None:
        for char in "\\(){}[]":
            self.assertIn(char, DEFAULT_ESCAPE_CHARS)


class TestCompilePattern(unittest.TestCase):
    def test_escaped_term_matches_literally(self) -> None:
        for term in ("a(b", "x[1]", "{y}", "c\\d", "a.b", "*star", "+1", "q?", "$5", "a|b", "^up"):
            with self.subTest(term=term):
                pattern = compile_pattern(escape(term), case_sensitive=True)
                self.assertIsNotNone(pattern.search(f"before {term} after"))

    def test_metacharacters_are_not_operators(self) -> None:
        self.assertIsNone(compile_pattern(escape("a(b"), True).search("ab"))
        self.assertIsNone(compile_pattern(escape("a.b"), True).search("axb"))
        self.assertIsNone(compile_pattern(escape("a|b"), True).search("a"))

    def test_case_insensitive_by_flag(self) -> None:
        self.assertIsNotNone(compile_pattern("albany", case_sensitive=False).search("ALBANY"))
        self.assertIsNone(compile_pattern("albany", case_sensitive=True).search("ALBANY"))

    def test_anchored_matches_only_at_start(self) -> None:
        pattern = compile_pattern(escape("alb"), case_sensitive=False, anchored=True)
        self.assertIsNotNone(pattern.search("Albany, NY"))
        self.assertIsNone(pattern.search("BAlbany, OR"))

    def test_finditer_is_leftmost_non_overlapping(self) -> None:
        pattern = compile_pattern("aa", case_sensitive=True)
        self.assertEqual([m.span() for m in pattern.finditer("aaaaa")], [(0, 2), (2, 4)])

    def test_narrowed_escape_set_raises_pattern_error(self) -> None:
        with self.assertRaises(PatternError):
            compile_pattern(escape("*a", frozenset("()")), case_sensitive=True)

    def test_pattern_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(PatternError, ValueError))


if __name__ == "__main__":
    unittest.main()
