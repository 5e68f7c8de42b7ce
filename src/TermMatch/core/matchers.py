"""Field matchers: the per-term, per-record predicate used while filtering.

A matcher answers "does this term match this record?". The engine calls the
configured matcher once per (term, record) pair and never catches its
exceptions, so custom matchers see every call and own their failures.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, Sequence

from TermMatch.core.models import Record


class FieldMatcher(Protocol):
    """Protocol for a per-term record predicate."""

    def test(self, term: str, pattern: re.Pattern[str], record: Record) -> bool:
        """Return True when ``term`` (compiled as ``pattern``) matches ``record``.

        Args:
            term: Raw term text as typed by the user.
            pattern: Compiled pattern for the escaped term.
            record: Record under test; must not be mutated.
        """
        raise NotImplementedError


def read_field(record: Record, name: str) -> str:
    """Read one field of a record as text.

    Mappings are read by key, other objects by attribute. A missing field or
    a ``None`` value reads as ``""``.
    """
    if isinstance(record, Mapping):
        value: Any = record.get(name)
    else:
        value = getattr(record, name, None)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class DisplayFieldMatcher:
    """Default matcher: the term occurs anywhere in the display field."""

    field: str

    def test(self, term: str, pattern: re.Pattern[str], record: Record) -> bool:
        del term
        return pattern.search(read_field(record, self.field)) is not None


@dataclass(frozen=True, slots=True)
class MultiFieldMatcher:
    """Match the term against several fields.

    Any field may match by default; with ``require_all`` every field must.
    """

    fields: Sequence[str]
    require_all: bool = False

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("MultiFieldMatcher needs at least one field")
        object.__setattr__(self, "fields", tuple(self.fields))

    def test(self, term: str, pattern: re.Pattern[str], record: Record) -> bool:
        del term
        hits = (pattern.search(read_field(record, name)) is not None for name in self.fields)
        return all(hits) if self.require_all else any(hits)


@dataclass(frozen=True, slots=True)
class ExactFieldMatcher:
    """Match when the raw term equals a field value exactly.

    An optional ``fallback`` matcher is consulted when the exact comparison
    fails, e.g. exact code match OR substring match on the display field.
    """

    field: str
    fallback: FieldMatcher | None = None
    case_sensitive: bool = True

    def test(self, term: str, pattern: re.Pattern[str], record: Record) -> bool:
        value = read_field(record, self.field)
        if self.case_sensitive:
            exact = value == term
        else:
            exact = value.casefold() == term.casefold()
        if exact:
            return True
        if self.fallback is None:
            return False
        return self.fallback.test(term, pattern, record)


@dataclass(frozen=True, slots=True)
class CallableMatcher:
    """Adapt a plain ``func(term, pattern, record) -> bool`` to `FieldMatcher`."""

    func: Callable[[str, re.Pattern[str], Record], bool]

    def test(self, term: str, pattern: re.Pattern[str], record: Record) -> bool:
        return bool(self.func(term, pattern, record))
