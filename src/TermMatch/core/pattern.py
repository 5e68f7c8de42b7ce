"""Literal-text pattern building.

Terms typed by a user are embedded into regular expressions. Every character
in the escape set is replaced by its `re.escape` form first, so the compiled
pattern matches the term as plain text, whatever characters the set holds.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Final

DEFAULT_ESCAPE_CHARS: Final[frozenset[str]] = frozenset("\\(){}[].*+?^$|")


class PatternError(ValueError):
    """Raised when escaped text still does not compile into a pattern."""


def escape(term: str, escape_chars: AbstractSet[str] = DEFAULT_ESCAPE_CHARS) -> str:
    """Regex-escape every character of ``term`` found in ``escape_chars``.

    Args:
        term: Raw user text.
        escape_chars: Characters that must be escaped.

    Returns:
        Text safe to embed in a regular expression.
    """
    return "".join(re.escape(char) if char in escape_chars else char for char in term)


def compile_pattern(escaped_term: str, case_sensitive: bool, *, anchored: bool = False) -> re.Pattern[str]:
    """Compile already-escaped text into a match pattern.

    Args:
        escaped_term: Output of `escape`.
        case_sensitive: When False the pattern ignores case.
        anchored: Require the match to start at the beginning of the text.

    Returns:
        Compiled pattern; use ``search`` for substring tests and
        ``finditer`` for leftmost-first, non-overlapping occurrences.

    Raises:
        PatternError: If the text is not a valid expression, which only
            happens when a caller narrowed the escape set.
    """
    source = f"^{escaped_term}" if anchored else escaped_term
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise PatternError(f"Cannot compile escaped term {escaped_term!r}: {exc}") from exc


def normalize_escape_chars(value: str | AbstractSet[str] | None) -> frozenset[str]:
    """Turn a configured escape set (string or set of characters) into a frozenset."""
    if value is None:
        return DEFAULT_ESCAPE_CHARS
    return frozenset(value)
