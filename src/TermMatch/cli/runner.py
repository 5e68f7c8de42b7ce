"""Command runner for coordinating CLI execution.

Configures logging, builds components and maps failures to ``click.Abort``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from TermMatch.cli.commands import FilterCommand
from TermMatch.config import AppConfig
from TermMatch.core.highlight import Highlighter
from TermMatch.renderers import create_output_writer
from TermMatch.services import create_filter_service, create_highlighter
from TermMatch.storage import load_records
from TermMatch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution for the CLI."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_filter(self, action: str, records_path: Path, queries: Sequence[str], *, force_all: bool = False) -> int:
        """Filter records from ``records_path`` for each query.

        Args:
            action: The CLI command name (e.g., 'filter').
            records_path: JSON or YAML record file.
            queries: Query strings.
            force_all: Bypass ``min_chars`` and show all records for empty queries.

        Returns:
            Total number of matched records.

        Raises:
            click.Abort: When loading or filtering fails.
        """
        self._configure_logging(action)
        try:
            records = load_records(records_path)
            service = create_filter_service(self.config, records)
            output_writer = create_output_writer(self.config)
            command = FilterCommand(config=self.config, service=service, output_writer=output_writer)
            total = command.execute(queries, force_all=force_all)
            output_writer.finalize(action)
            return total
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Filter failed: %s", e)
            raise click.Abort from e

    def run_highlight(self, action: str, query: str, text: str) -> str:
        """Highlight ``text`` for ``query`` with the configured markers.

        Raises:
            click.Abort: When highlighting fails.
        """
        self._configure_logging(action)
        try:
            highlighter = create_highlighter(self.config) or Highlighter()
            return highlighter.render(query, text, self.config.match.case_sensitive)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Highlight failed: %s", e)
            raise click.Abort from e
