"""Command implementations for TermMatch CLI.

Encapsulates the filter command's business logic, separated from CLI
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from TermMatch.config import AppConfig
from TermMatch.renderers import OutputWriter
from TermMatch.renderers.mapper import map_result_to_views
from TermMatch.services import FilterService
from TermMatch.utils.log import log


@dataclass(slots=True)
class FilterCommand:
    """Run one or more queries over the loaded records.

    Each query is filtered independently; results go to the output writer.
    """

    config: AppConfig
    service: FilterService
    output_writer: OutputWriter

    def execute(self, queries: Sequence[str], *, force_all: bool = False) -> int:
        """Execute all queries.

        Args:
            queries: Query strings, run in order.
            force_all: Bypass ``min_chars`` and show all records for empty queries.

        Returns:
            Total number of matched records across queries.
        """
        total = 0
        for idx, query in enumerate(queries, start=1):
            log.debug("Running query %d/%d: %r", idx, len(queries), query)
            result = self.service.query(query, force_all=force_all)
            if result is None:
                log.warning(
                    "Query %r is shorter than match.min_chars=%d, skipped",
                    query,
                    self.config.match.min_chars,
                )
                continue
            views = map_result_to_views(result, self.config.match.value_field)
            self.output_writer.write_query_result(views, query)
            total += result.count
        return total
