"""Match domain configuration: how queries filter records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TermMatch.config.common import (
    expect_bool,
    expect_choice,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)
from TermMatch.core.engine import MatchSettings
from TermMatch.core.models import MatchMode, MatchPolicy
from TermMatch.core.pattern import DEFAULT_ESCAPE_CHARS, normalize_escape_chars

_ALLOWED_MATCHERS = frozenset({"display", "display_value", "exact"})


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Store validated matching settings.

    Attributes:
        any_match: Split the query into terms matched anywhere in the field.
            When False the whole query must match the start of the field.
        or_match: Accept records matching any term instead of all terms.
        case_sensitive: Whether matching respects case.
        escape_chars: Characters escaped before building patterns.
        display_field: Record field shown to users and matched by default.
        value_field: Record field holding the record's value/code.
        min_chars: Minimum query length before filtering runs.
        matcher: Matcher strategy name (display, display_value, exact).
        exact_field: Field compared exactly by the ``exact`` matcher.
    """

    any_match: bool = True
    or_match: bool = False
    case_sensitive: bool = False
    escape_chars: str = "".join(sorted(DEFAULT_ESCAPE_CHARS))
    display_field: str = "name"
    value_field: str = ""
    min_chars: int = 2
    matcher: str = "display"
    exact_field: str = ""

    @property
    def mode(self) -> MatchMode:
        return MatchMode.SUBSTRING if self.any_match else MatchMode.ANCHORED_WHOLE

    @property
    def policy(self) -> MatchPolicy:
        return MatchPolicy.OR if self.or_match else MatchPolicy.AND

    def to_settings(self) -> MatchSettings:
        """Build engine settings from this configuration."""
        return MatchSettings(
            mode=self.mode,
            policy=self.policy,
            case_sensitive=self.case_sensitive,
            escape_chars=normalize_escape_chars(self.escape_chars),
        )


def load_match(raw: Mapping[str, Any]) -> MatchConfig:
    """Load the ``match`` section from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed match configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If ``match.matcher`` is unknown.
    """
    section = get_section(raw, "match", required=False)
    defaults = MatchConfig()
    return MatchConfig(
        any_match=expect_bool(get_optional_value(section, "any_match", defaults.any_match), "match.any_match"),
        or_match=expect_bool(get_optional_value(section, "or_match", defaults.or_match), "match.or_match"),
        case_sensitive=expect_bool(
            get_optional_value(section, "case_sensitive", defaults.case_sensitive),
            "match.case_sensitive",
        ),
        escape_chars=expect_str(
            get_optional_value(section, "escape_chars", defaults.escape_chars),
            "match.escape_chars",
        ),
        display_field=expect_str(
            get_optional_value(section, "display_field", defaults.display_field),
            "match.display_field",
        ).strip(),
        value_field=expect_str(
            get_optional_value(section, "value_field", defaults.value_field),
            "match.value_field",
        ).strip(),
        min_chars=expect_int(get_optional_value(section, "min_chars", defaults.min_chars), "match.min_chars"),
        matcher=expect_choice(
            get_optional_value(section, "matcher", defaults.matcher),
            _ALLOWED_MATCHERS,
            "match.matcher",
        ),
        exact_field=expect_str(
            get_optional_value(section, "exact_field", defaults.exact_field),
            "match.exact_field",
        ).strip(),
    )


def check_match(config: MatchConfig) -> None:
    """Validate match domain constraints.

    Raises:
        ValueError: If values violate match constraints.
    """
    if not config.display_field:
        raise ValueError("match.display_field must not be empty")
    if config.min_chars < 0:
        raise ValueError("match.min_chars must be >= 0")
    if config.matcher == "display_value" and not config.value_field:
        raise ValueError("match.value_field is required when match.matcher is display_value")
    if config.matcher == "exact" and not config.exact_field:
        raise ValueError("match.exact_field is required when match.matcher is exact")
