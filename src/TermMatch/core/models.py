from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


Record = Union[Mapping[str, Any], Any]
"""A record is any key/value mapping, or an object exposing fields as attributes."""


class MatchPolicy(str, Enum):
    """How per-term results combine into one decision for a record.

    - `AND`: every term must match
    - `OR`: at least one term must match
    """

    AND = "AND"
    OR = "OR"


class MatchMode(str, Enum):
    """Which pattern(s) a query compiles into.

    - `SUBSTRING`: the query is split into terms; each term may match anywhere
      in the field and the results are aggregated under a `MatchPolicy`.
    - `ANCHORED_WHOLE`: the unsplit query must match at the start of the field.
    """

    SUBSTRING = "substring"
    ANCHORED_WHOLE = "anchored_whole"


@dataclass(frozen=True, slots=True, order=True)
class HighlightSpan:
    """Half-open character range ``[start, end)`` of matched display text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid highlight span: ({self.start}, {self.end})")

    def overlaps(self, other: HighlightSpan) -> bool:
        """Return True when the spans share at least one character."""
        return self.start < other.end and other.start < self.end

    def union(self, other: HighlightSpan) -> HighlightSpan:
        return HighlightSpan(min(self.start, other.start), max(self.end, other.end))
