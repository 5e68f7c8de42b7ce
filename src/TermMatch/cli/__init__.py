"""CLI package for TermMatch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from TermMatch.cli.runner import CommandRunner
from TermMatch.cli.ui import cli


def main() -> None:
    """Run TermMatch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
