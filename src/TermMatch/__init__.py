"""TermMatch: multi-term record filtering and match highlighting."""

from __future__ import annotations

from TermMatch.core.aggregate import aggregate
from TermMatch.core.engine import AnchoredPlan, FilterEngine, MatchSettings, SubstringPlan, compile_plan
from TermMatch.core.highlight import Highlighter, find_spans, merge_spans, render, strip_markers
from TermMatch.core.matchers import (
    CallableMatcher,
    DisplayFieldMatcher,
    ExactFieldMatcher,
    FieldMatcher,
    MultiFieldMatcher,
    read_field,
)
from TermMatch.core.models import HighlightSpan, MatchMode, MatchPolicy
from TermMatch.core.pattern import DEFAULT_ESCAPE_CHARS, PatternError, compile_pattern, escape
from TermMatch.core.query import tokenize

__all__ = [
    "AnchoredPlan",
    "CallableMatcher",
    "DEFAULT_ESCAPE_CHARS",
    "DisplayFieldMatcher",
    "ExactFieldMatcher",
    "FieldMatcher",
    "FilterEngine",
    "HighlightSpan",
    "Highlighter",
    "MatchMode",
    "MatchPolicy",
    "MatchSettings",
    "MultiFieldMatcher",
    "PatternError",
    "SubstringPlan",
    "aggregate",
    "compile_pattern",
    "compile_plan",
    "escape",
    "find_spans",
    "merge_spans",
    "read_field",
    "render",
    "strip_markers",
    "tokenize",
]
