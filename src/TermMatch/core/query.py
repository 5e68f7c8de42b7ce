from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(query: str) -> tuple[str, ...]:
    """Split a raw query into terms.

    Runs of whitespace separate terms. Leading, trailing and repeated
    whitespace never produce empty terms, so ``""`` and ``"   "`` both yield
    an empty tuple.
    """
    return tuple(term for term in _WHITESPACE_RE.split(query) if term)
