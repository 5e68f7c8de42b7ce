"""Filter service: runs queries over a record store and highlights results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from TermMatch.core.engine import FilterEngine, RecordPredicate
from TermMatch.core.highlight import Highlighter
from TermMatch.core.matchers import read_field
from TermMatch.core.models import Record
from TermMatch.storage.records import RecordStore
from TermMatch.utils.log import log


@dataclass(frozen=True, slots=True)
class MatchedRecord:
    """One accepted record together with its rendered display text."""

    record: Record
    display: str
    markup: str


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of one query.

    Attributes:
        query: Query text that produced the result.
        matches: Accepted records in store order.
        filtered: False when the filter was disabled (``force_all`` with an
            empty query) and every record is shown.
        failures: Number of records whose matcher raised.
    """

    query: str
    matches: Sequence[MatchedRecord]
    filtered: bool
    failures: int = 0

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def expanded(self) -> bool:
        """Whether the result list should be shown at all."""
        return bool(self.matches)


@dataclass(slots=True)
class FilterService:
    """Apply queries to a record store.

    Queries shorter than ``min_chars`` are not run unless ``force_all`` is
    given. A matcher that raises for a record is logged and that record is
    treated as non-matching, so one bad record never aborts a filter pass.
    """

    engine: FilterEngine
    store: RecordStore
    display_field: str
    highlighter: Highlighter | None = None
    min_chars: int = 0

    def query(self, query: str, *, force_all: bool = False) -> FilterResult | None:
        """Filter the store for ``query``.

        Args:
            query: Raw query text.
            force_all: Show every record when the query is empty, and bypass
                the ``min_chars`` threshold.

        Returns:
            The filter result, or None when the query is below ``min_chars``.
        """
        if not force_all and len(query) < self.min_chars:
            log.debug("Query shorter than min_chars=%d, skipped: %r", self.min_chars, query)
            return None

        if force_all and not query:
            records = self.store.filter(None)
            log.info("Filter disabled, showing all %d records", len(records))
            return FilterResult(
                query=query,
                matches=tuple(self._view(record, query, highlight=False) for record in records),
                filtered=False,
            )

        counter = _FailureCounter()
        predicate = self._isolated(self.engine.make_predicate(query), counter)
        records = self.store.filter(predicate)
        log.info("Query %r matched %d/%d records", query, len(records), len(self.store))
        if counter.failures:
            log.warning("Matcher failed for %d records, treated as non-matching", counter.failures)
        return FilterResult(
            query=query,
            matches=tuple(self._view(record, query, highlight=True) for record in records),
            filtered=True,
            failures=counter.failures,
        )

    def _view(self, record: Record, query: str, *, highlight: bool) -> MatchedRecord:
        display = read_field(record, self.display_field)
        markup = display
        if highlight and self.highlighter is not None and query:
            markup = self.highlighter.render(query, display, self.engine.settings.case_sensitive)
        return MatchedRecord(record=record, display=display, markup=markup)

    @staticmethod
    def _isolated(predicate: RecordPredicate, counter: _FailureCounter) -> RecordPredicate:
        def guarded(record: Record) -> bool:
            try:
                return predicate(record)
            except Exception as error:  # noqa: BLE001 - matcher failure must be isolated per record
                counter.failures += 1
                log.warning("Matcher failed: record=%r error=%s", record, error)
                return False

        return guarded


@dataclass(slots=True)
class _FailureCounter:
    failures: int = 0
