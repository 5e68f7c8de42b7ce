"""Console text output renderers.

Renders filtered records as numbered lines showing highlighted display
text, or the empty-state line when nothing matched.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from TermMatch.renderers.base import EMPTY_TEXT, OutputWriter
from TermMatch.renderers.view_models import RecordView
from TermMatch.utils.log import log


def render_text(records: Iterable[RecordView]) -> str:
    """Render record views into a human-readable text block.

    Args:
        records: Iterable of record views.

    Returns:
        A formatted string ready to be printed, ending with a newline.
    """
    lines: list[str] = []
    for view in records:
        line = f"{view.index}. {view.markup}"
        if view.value:
            line += f"  [{view.value}]"
        lines.append(line)
    if not lines:
        lines.append(EMPTY_TEXT)
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_query_result(self, records: Sequence[RecordView], query: str) -> None:
        log.info("query=%r matches=%d", query, len(records))
        for line in render_text(records).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
