"""JSON output renderers.

Renders record views into JSON-serializable objects and writes one file per
command run.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from TermMatch.renderers.base import OutputWriter
from TermMatch.renderers.view_models import RecordView
from TermMatch.utils.log import log


def render_json(records: Iterable[RecordView]) -> list[dict]:
    """Render record views into JSON-serializable Python objects."""
    out: list[dict] = []
    for view in records:
        item = {
            "index": view.index,
            "display": view.display,
            "markup": view.markup,
            "record": dict(view.data),
        }
        if view.value is not None:
            item["value"] = view.value
        out.append(item)
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []
        self.output_path: Path | None = None

    def write_query_result(self, records: Sequence[RecordView], query: str) -> None:
        self.all_results.append(
            {
                "query": query,
                "count": len(records),
                "records": render_json(records),
            }
        )

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2, default=str)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        self.output_path = output_path
        log.info("JSON saved to %s", output_path)
