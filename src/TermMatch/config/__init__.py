from __future__ import annotations

"""Public configuration API for TermMatch."""

from TermMatch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from TermMatch.config.match import MatchConfig
from TermMatch.config.output import HighlightConfig, OutputConfig
from TermMatch.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "MatchConfig",
    "HighlightConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
