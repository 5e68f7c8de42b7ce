"""View models for output rendering.

Separates what writers display from the raw records held by the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class RecordView:
    """Record view model for output rendering.

    Attributes:
        index: 1-based position in the filtered result.
        display: Plain display text.
        markup: Display text with highlight markers applied.
        value: Value field text, or None when not configured.
        data: Read-only copy of the record's fields when it is a mapping.
    """

    index: int
    display: str
    markup: str
    value: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)
