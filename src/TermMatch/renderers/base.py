"""Base classes for output writers.

Writers receive each query's records as view models and may buffer them
until `finalize` is called at the end of a command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from TermMatch.renderers.view_models import RecordView

EMPTY_TEXT = "No matches found!"


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(self, records: Sequence[RecordView], query: str) -> None:
        """Write the records accepted for one query.

        Args:
            records: Views of the accepted records; may be empty.
            query: The query that produced these records.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'filter').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(self, records: Sequence[RecordView], query: str) -> None:
        for writer in self.writers:
            writer.write_query_result(records, query)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
