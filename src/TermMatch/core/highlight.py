"""Highlight matched terms in display text.

All terms of a query are joined into one alternation pattern. Every match
start in the text is collected, including matches of one term that overlap
another term's match, and the resulting spans are merged so that no
character is wrapped twice. Text outside the spans is copied verbatim; any
markup escaping for the output context is the caller's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable

from TermMatch.core.models import HighlightSpan
from TermMatch.core.pattern import DEFAULT_ESCAPE_CHARS, compile_pattern, escape
from TermMatch.core.query import tokenize

DEFAULT_OPEN_MARKER = '<span class="x-combomatch">'
DEFAULT_CLOSE_MARKER = "</span>"


def build_alternation(
    terms: Iterable[str],
    case_sensitive: bool,
    escape_chars: AbstractSet[str] = DEFAULT_ESCAPE_CHARS,
) -> re.Pattern[str] | None:
    """Compile escaped terms into a single ``a|b|c`` pattern.

    Longer terms come first so that, at a given position, the longest term
    wins. Returns None when there are no terms.
    """
    unique = sorted(set(terms), key=lambda term: (-len(term), term))
    if not unique:
        return None
    return compile_pattern("|".join(escape(term, escape_chars) for term in unique), case_sensitive)


def merge_spans(spans: Iterable[HighlightSpan]) -> list[HighlightSpan]:
    """Merge overlapping spans into a sorted, disjoint list.

    Spans that only touch stay separate, so back-to-back matches are wrapped
    one by one.
    """
    merged: list[HighlightSpan] = []
    for span in sorted(spans):
        if merged and merged[-1].overlaps(span):
            merged[-1] = merged[-1].union(span)
        else:
            merged.append(span)
    return merged


def find_spans(
    query: str,
    text: str,
    case_sensitive: bool = False,
    escape_chars: AbstractSet[str] = DEFAULT_ESCAPE_CHARS,
) -> list[HighlightSpan]:
    """Locate every matched range of ``text`` for the terms of ``query``.

    Returns:
        Merged, sorted spans; empty when the query has no terms.
    """
    pattern = build_alternation(tokenize(query), case_sensitive, escape_chars)
    if pattern is None:
        return []

    spans: list[HighlightSpan] = []
    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            break
        if match.end() > match.start():
            spans.append(HighlightSpan(match.start(), match.end()))
        # advance one character so a different term starting inside this match is still found
        pos = match.start() + 1
    return merge_spans(spans)


@dataclass(frozen=True, slots=True)
class Highlighter:
    """Wrap matched fragments of display text in markers.

    Attributes:
        open_marker: Text inserted before each merged span.
        close_marker: Text inserted after each merged span.
        escape_chars: Characters escaped in each term.
    """

    open_marker: str = DEFAULT_OPEN_MARKER
    close_marker: str = DEFAULT_CLOSE_MARKER
    escape_chars: AbstractSet[str] = field(default=DEFAULT_ESCAPE_CHARS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "escape_chars", frozenset(self.escape_chars))

    def render(self, query: str, text: str, case_sensitive: bool = False) -> str:
        """Return ``text`` with every matched span wrapped in the markers.

        The text is returned unchanged when the query has no terms or nothing
        matches. Whether the record passed the filter is not checked here.
        """
        spans = find_spans(query, text, case_sensitive, self.escape_chars)
        if not spans:
            return text

        parts: list[str] = []
        cursor = 0
        for span in spans:
            parts.append(text[cursor:span.start])
            parts.append(self.open_marker)
            parts.append(text[span.start:span.end])
            parts.append(self.close_marker)
            cursor = span.end
        parts.append(text[cursor:])
        return "".join(parts)

    def strip(self, markup: str) -> str:
        """Remove this highlighter's markers from ``markup``."""
        return strip_markers(markup, self.open_marker, self.close_marker)


def strip_markers(
    markup: str,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
) -> str:
    """Undo `Highlighter.render` for text that contained no markers itself."""
    return markup.replace(open_marker, "").replace(close_marker, "")


_DEFAULT_HIGHLIGHTER = Highlighter()


def render(query: str, text: str, case_sensitive: bool = False) -> str:
    """Highlight ``text`` for ``query`` with the default markers."""
    return _DEFAULT_HIGHLIGHTER.render(query, text, case_sensitive)
