from __future__ import annotations

"""Typed accessors shared by the per-section config loaders.

Every error message carries the dotted key path (``match.min_chars``) so a
bad YAML value can be located without a traceback.
"""

from typing import Any, Collection, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the top-level section ``key``.

    Args:
        raw: Root configuration mapping.
        key: Section name, e.g. ``match``.
        required: Raise when the section is absent instead of returning ``{}``.

    Raises:
        ValueError: If a required section is absent.
        TypeError: If the section is present but not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    return section.get(field, default)


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    # YAML "yes"/"on" already arrive as bool; quoted strings are rejected
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Accept a real integer; ``True``/``False`` are refused even though bool subclasses int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a YAML sequence of strings, reporting the first bad index."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
    return list(value)


def expect_choice(value: Any, choices: Collection[str], config_key: str) -> str:
    """Validate a case-insensitive string choice and return it lowercased.

    Raises:
        TypeError: If value is not a string.
        ValueError: If value is not one of ``choices``.
    """
    normalized = expect_str(value, config_key).strip().lower()
    if normalized not in choices:
        raise ValueError(f"{config_key} must be one of {sorted(choices)}")
    return normalized
