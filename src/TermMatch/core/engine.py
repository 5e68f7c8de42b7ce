"""Filter engine: turns a query into a record-acceptance predicate.

The engine keeps one compiled `MatchPlan` for the current query. Asking for
a predicate with the same query reuses it; a new query replaces it. Only
patterns are cached, never per-record outcomes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import AbstractSet, Callable, Protocol

from TermMatch.core.aggregate import aggregate
from TermMatch.core.matchers import FieldMatcher
from TermMatch.core.models import MatchMode, MatchPolicy, Record
from TermMatch.core.pattern import DEFAULT_ESCAPE_CHARS, compile_pattern, escape
from TermMatch.core.query import tokenize
from TermMatch.utils.log import log

RecordPredicate = Callable[[Record], bool]


@dataclass(frozen=True, slots=True)
class MatchSettings:
    """Engine-level matching configuration, fixed for the engine's lifetime.

    Attributes:
        mode: Multi-term substring matching or anchored whole-query matching.
        policy: AND/OR aggregation used in substring mode.
        case_sensitive: Whether patterns respect case.
        escape_chars: Characters escaped before compilation.
    """

    mode: MatchMode = MatchMode.SUBSTRING
    policy: MatchPolicy = MatchPolicy.AND
    case_sensitive: bool = False
    escape_chars: AbstractSet[str] = field(default=DEFAULT_ESCAPE_CHARS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "escape_chars", frozenset(self.escape_chars))


class MatchPlan(Protocol):
    """Compiled form of one query."""

    query: str

    def accepts(self, record: Record, matcher: FieldMatcher) -> bool:
        """Return True when ``record`` satisfies the compiled query."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class SubstringPlan:
    """One pattern per term, aggregated under a policy."""

    query: str
    terms: tuple[tuple[str, re.Pattern[str]], ...]
    policy: MatchPolicy

    def accepts(self, record: Record, matcher: FieldMatcher) -> bool:
        return aggregate((matcher.test(term, pattern, record) for term, pattern in self.terms), self.policy)


@dataclass(frozen=True, slots=True)
class AnchoredPlan:
    """The unsplit query, anchored at the start of the field, tested once."""

    query: str
    pattern: re.Pattern[str]

    def accepts(self, record: Record, matcher: FieldMatcher) -> bool:
        return matcher.test(self.query, self.pattern, record)


def compile_plan(query: str, settings: MatchSettings) -> MatchPlan:
    """Compile ``query`` into the plan for the configured match mode.

    Args:
        query: Raw query text.
        settings: Matching configuration.

    Returns:
        `SubstringPlan` or `AnchoredPlan`.
    """
    if settings.mode is MatchMode.ANCHORED_WHOLE:
        escaped = escape(query, settings.escape_chars)
        return AnchoredPlan(query=query, pattern=compile_pattern(escaped, settings.case_sensitive, anchored=True))

    terms = tuple(
        (term, compile_pattern(escape(term, settings.escape_chars), settings.case_sensitive))
        for term in tokenize(query)
    )
    return SubstringPlan(query=query, terms=terms, policy=settings.policy)


class FilterEngine:
    """Build record predicates for successive queries."""

    def __init__(self, settings: MatchSettings, matcher: FieldMatcher) -> None:
        """Initialize the engine.

        Args:
            settings: Matching configuration.
            matcher: Per-term record predicate, invoked unmodified.
        """
        self.settings = settings
        self.matcher = matcher
        self._plan: MatchPlan | None = None

    @property
    def plan(self) -> MatchPlan | None:
        """Plan compiled for the most recent query, if any."""
        return self._plan

    def make_predicate(self, query: str) -> RecordPredicate:
        """Return the acceptance predicate for ``query``.

        Matcher exceptions raised while the predicate runs propagate to the
        caller.
        """
        plan = self._plan_for(query)
        matcher = self.matcher

        def predicate(record: Record) -> bool:
            return plan.accepts(record, matcher)

        return predicate

    def accepts(self, query: str, record: Record) -> bool:
        """Evaluate one record against ``query``."""
        return self._plan_for(query).accepts(record, self.matcher)

    def _plan_for(self, query: str) -> MatchPlan:
        plan = self._plan
        if plan is not None and plan.query == query:
            return plan
        plan = compile_plan(query, self.settings)
        log.debug("Compiled %s plan for query=%r", self.settings.mode.value, query)
        self._plan = plan
        return plan
