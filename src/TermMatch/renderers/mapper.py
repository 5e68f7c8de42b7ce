"""Mapper from filter results to RecordView display models."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from TermMatch.core.matchers import read_field
from TermMatch.renderers.view_models import RecordView
from TermMatch.services.filtering import FilterResult, MatchedRecord


def map_match_to_view(match: MatchedRecord, index: int, value_field: str = "") -> RecordView:
    """Map one matched record to its view.

    Args:
        match: Accepted record with rendered markup.
        index: 1-based position in the result.
        value_field: Field read as the record's value; empty to skip.

    Returns:
        RecordView for output writers.
    """
    data = MappingProxyType(dict(match.record)) if isinstance(match.record, Mapping) else MappingProxyType({})
    return RecordView(
        index=index,
        display=match.display,
        markup=match.markup,
        value=read_field(match.record, value_field) if value_field else None,
        data=data,
    )


def map_result_to_views(result: FilterResult, value_field: str = "") -> list[RecordView]:
    """Batch map a filter result to views, keeping store order."""
    return [map_match_to_view(match, idx, value_field) for idx, match in enumerate(result.matches, start=1)]
