"""Service layer for TermMatch.

Builds matchers, engines and filter services from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from TermMatch.core.engine import FilterEngine
from TermMatch.core.highlight import Highlighter
from TermMatch.core.matchers import (
    DisplayFieldMatcher,
    ExactFieldMatcher,
    FieldMatcher,
    MultiFieldMatcher,
)
from TermMatch.core.pattern import normalize_escape_chars
from TermMatch.services.filtering import FilterResult, FilterService, MatchedRecord
from TermMatch.storage.records import RecordStore

if TYPE_CHECKING:
    from TermMatch.config import AppConfig, MatchConfig
    from TermMatch.core.models import Record


def create_matcher(config: MatchConfig) -> FieldMatcher:
    """Create the field matcher named by ``match.matcher``.

    Args:
        config: Match configuration.

    Returns:
        Configured matcher strategy.

    Raises:
        ValueError: If the matcher name is unknown.
    """
    display = DisplayFieldMatcher(config.display_field)
    if config.matcher == "display":
        return display
    if config.matcher == "display_value":
        return MultiFieldMatcher((config.display_field, config.value_field))
    if config.matcher == "exact":
        return ExactFieldMatcher(config.exact_field, fallback=display)
    raise ValueError(f"Unsupported matcher in config.match.matcher: {config.matcher}")


def create_highlighter(config: AppConfig) -> Highlighter | None:
    """Create the highlighter, or None when highlighting is disabled."""
    if not config.highlight.enabled:
        return None
    return Highlighter(
        open_marker=config.highlight.open_marker,
        close_marker=config.highlight.close_marker,
        escape_chars=normalize_escape_chars(config.match.escape_chars),
    )


def create_filter_service(
    config: AppConfig,
    records: Iterable[Record],
    matcher: FieldMatcher | None = None,
) -> FilterService:
    """Create a filter service over ``records``.

    Args:
        config: Application configuration.
        records: Records to filter, in display order.
        matcher: Optional matcher overriding ``match.matcher``.

    Returns:
        Configured FilterService instance.
    """
    engine = FilterEngine(config.match.to_settings(), matcher or create_matcher(config.match))
    return FilterService(
        engine=engine,
        store=RecordStore(records),
        display_field=config.match.display_field,
        highlighter=create_highlighter(config),
        min_chars=config.match.min_chars,
    )


__all__ = [
    "FilterResult",
    "FilterService",
    "MatchedRecord",
    "create_filter_service",
    "create_highlighter",
    "create_matcher",
]
