"""Tests for the filter engine in substring and anchored modes."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TermMatch.core.engine import AnchoredPlan, FilterEngine, MatchSettings, SubstringPlan
from TermMatch.core.matchers import CallableMatcher, DisplayFieldMatcher
from TermMatch.core.models import MatchMode, MatchPolicy

ALBANY_NY = {"name": "Albany, NY"}
ALBANY_OR = {"name": "Albany, OR"}
RECORDS = [ALBANY_NY, ALBANY_OR]


def _engine(**kwargs) -> FilterEngine:
    return FilterEngine(MatchSettings(**kwargs), DisplayFieldMatcher("name"))


def _filter(engine: FilterEngine, query: str) -> list[dict]:
    predicate = engine.make_predicate(query)
    return [record for record in RECORDS if predicate(record)]


class TestSubstringMode(unittest.TestCase):
    def test_and_policy_requires_all_terms(self) -> None:
        engine = _engine(policy=MatchPolicy.AND)
        self.assertEqual(_filter(engine, "albany or"), [ALBANY_OR])

    def test_or_policy_accepts_any_term(self) -> None:
        engine = _engine(policy=MatchPolicy.OR)
        self.assertEqual(_filter(engine, "albany or"), [ALBANY_NY, ALBANY_OR])

    def test_or_policy_rejects_record_matching_no_term(self) -> None:
        engine = _engine(policy=MatchPolicy.OR)
        self.assertEqual(_filter(engine, "boston tx"), [])

    def test_metacharacter_query_matches_literally_without_error(self) -> None:
        engine = _engine(policy=MatchPolicy.AND)
        self.assertEqual(_filter(engine, "al(b"), [])
        predicate = engine.make_predicate("al(b")
        self.assertTrue(predicate({"name": "Val(bany"}))

    def test_empty_query_accepts_every_record(self) -> None:
        for policy in MatchPolicy:
            with self.subTest(policy=policy):
                engine = _engine(policy=policy)
                self.assertEqual(_filter(engine, ""), RECORDS)
                self.assertEqual(_filter(engine, "   "), RECORDS)

    def test_dropping_a_term_changes_and_result(self) -> None:
        engine = _engine(policy=MatchPolicy.AND)
        self.assertFalse(engine.accepts("albany or", ALBANY_NY))
        self.assertTrue(engine.accepts("albany", ALBANY_NY))

    def test_case_sensitive_setting(self) -> None:
        engine = _engine(case_sensitive=True)
        self.assertEqual(_filter(engine, "albany"), [])
        self.assertEqual(_filter(engine, "Albany OR"), [ALBANY_OR])

    def test_letter_in_escape_set_matches_literally(self) -> None:
        engine = _engine(escape_chars=set("\\()[]{}d"))
        self.assertTrue(engine.accepts("dallas", {"name": "Dallas"}))
        self.assertFalse(engine.accepts("dallas", {"name": "Albany"}))

    def test_matcher_called_once_per_term_and_record(self) -> None:
        calls: list[tuple[str, str]] = []

        def func(term, pattern, record):
            calls.append((term, record["name"]))
            return pattern.search(record["name"]) is not None

        engine = FilterEngine(MatchSettings(policy=MatchPolicy.OR), CallableMatcher(func))
        predicate = engine.make_predicate("zzz yyy")
        for record in RECORDS:
            predicate(record)
        self.assertEqual(
            calls,
            [("zzz", "Albany, NY"), ("yyy", "Albany, NY"), ("zzz", "Albany, OR"), ("yyy", "Albany, OR")],
        )

    def test_matcher_receives_raw_term(self) -> None:
        terms: list[str] = []
        engine = FilterEngine(MatchSettings(), CallableMatcher(lambda term, pattern, record: terms.append(term) or True))
        engine.accepts("a(b", ALBANY_NY)
        self.assertEqual(terms, ["a(b"])

    def test_matcher_errors_propagate(self) -> None:
        def broken(term, pattern, record):
            raise KeyError("missing")

        engine = FilterEngine(MatchSettings(), CallableMatcher(broken))
        with self.assertRaises(KeyError):
            engine.make_predicate("albany")(ALBANY_NY)


class TestPlanCache(unittest.TestCase):
    def test_same_query_reuses_plan(self) -> None:
        engine = _engine()
        engine.make_predicate("albany")
        first = engine.plan
        engine.make_predicate("albany")
        self.assertIs(engine.plan, first)
        self.assertIsInstance(first, SubstringPlan)

    def test_new_query_replaces_plan(self) -> None:
        engine = _engine()
        engine.make_predicate("albany")
        first = engine.plan
        engine.make_predicate("albany or")
        self.assertIsNot(engine.plan, first)
        self.assertEqual(engine.plan.query, "albany or")
        self.assertEqual([term for term, _ in engine.plan.terms], ["albany", "or"])

    def test_outcomes_follow_current_record_state(self) -> None:
        engine = _engine()
        predicate = engine.make_predicate("boston")
        record = {"name": "Albany"}
        self.assertFalse(predicate(record))
        record["name"] = "Boston"
        self.assertTrue(predicate(record))


class TestAnchoredMode(unittest.TestCase):
    def test_whole_query_must_start_field(self) -> None:
        engine = _engine(mode=MatchMode.ANCHORED_WHOLE)
        self.assertEqual(_filter(engine, "albany, o"), [ALBANY_OR])
        self.assertEqual(_filter(engine, "bany"), [])

    def test_query_is_not_tokenized(self) -> None:
        engine = _engine(mode=MatchMode.ANCHORED_WHOLE, policy=MatchPolicy.OR)
        self.assertEqual(_filter(engine, "albany or"), [])
        self.assertIsInstance(engine.plan, AnchoredPlan)

    def test_empty_query_accepts_every_record(self) -> None:
        engine = _engine(mode=MatchMode.ANCHORED_WHOLE)
        self.assertEqual(_filter(engine, ""), RECORDS)

    def test_metacharacters_are_literal(self) -> None:
        engine = _engine(mode=MatchMode.ANCHORED_WHOLE)
        self.assertFalse(engine.accepts("a.b", {"name": "axb"}))
        self.assertTrue(engine.accepts("a.b", {"name": "a.b road"}))

    def test_matcher_tested_once_with_whole_query(self) -> None:
        calls: list[str] = []

        def func(term, pattern, record):
            calls.append(term)
            return True

        engine = FilterEngine(MatchSettings(mode=MatchMode.ANCHORED_WHOLE), CallableMatcher(func))
        engine.accepts("albany or", ALBANY_OR)
        self.assertEqual(calls, ["albany or"])


if __name__ == "__main__":
    unittest.main()
