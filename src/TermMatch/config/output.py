"""Output and highlight domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TermMatch.config.common import (
    expect_bool,
    expect_str,
    expect_str_list,
    get_optional_value,
    get_section,
)
from TermMatch.core.highlight import DEFAULT_CLOSE_MARKER, DEFAULT_OPEN_MARKER

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Highlight marker configuration."""

    enabled: bool = True
    open_marker: str = DEFAULT_OPEN_MARKER
    close_marker: str = DEFAULT_CLOSE_MARKER


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str = "output"
    formats: tuple[str, ...] = ("console",)


def load_highlight(raw: Mapping[str, Any]) -> HighlightConfig:
    """Load the ``highlight`` section from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "highlight", required=False)
    defaults = HighlightConfig()
    return HighlightConfig(
        enabled=expect_bool(get_optional_value(section, "enabled", defaults.enabled), "highlight.enabled"),
        open_marker=expect_str(
            get_optional_value(section, "open_marker", defaults.open_marker),
            "highlight.open_marker",
        ),
        close_marker=expect_str(
            get_optional_value(section, "close_marker", defaults.close_marker),
            "highlight.close_marker",
        ),
    )


def check_highlight(config: HighlightConfig) -> None:
    """Validate highlight markers.

    Raises:
        ValueError: If highlighting is enabled with an empty marker.
    """
    if config.enabled and not (config.open_marker and config.close_marker):
        raise ValueError("highlight.open_marker and highlight.close_marker must not be empty")


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    defaults = OutputConfig()
    formats = tuple(
        item.strip().lower()
        for item in expect_str_list(get_optional_value(section, "formats", list(defaults.formats)), "output.formats")
    )
    return OutputConfig(
        base_dir=expect_str(get_optional_value(section, "base_dir", defaults.base_dir), "output.base_dir"),
        formats=formats,
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
