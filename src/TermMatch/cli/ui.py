"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from TermMatch.cli.runner import CommandRunner
from TermMatch.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="TermMatch: filter records by multi-term queries and highlight matches.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="YAML config merged over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Optional override config file.
    """
    ctx.obj = load_config_with_defaults(config_path, default_path=DEFAULT_CONFIG_PATH)


@cli.command("filter")
@click.argument("queries", nargs=-1)
@click.option(
    "--records",
    "records_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    required=True,
    help="JSON or YAML file holding a list of records.",
)
@click.option("--force-all", is_flag=True, help="Ignore min_chars; an empty query shows every record.")
@click.pass_context
def filter_cmd(ctx: click.Context, queries: tuple[str, ...], records_path: Path, force_all: bool) -> None:
    """Filter records for each QUERY and write matches to the configured outputs.

    With no QUERY an empty query is run.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_filter(ctx.command.name, records_path, queries or ("",), force_all=force_all)


@cli.command("highlight")
@click.argument("query")
@click.argument("text")
@click.pass_context
def highlight_cmd(ctx: click.Context, query: str, text: str) -> None:
    """Print TEXT with the terms of QUERY highlighted."""
    runner = CommandRunner(ctx.obj)
    click.echo(runner.run_highlight(ctx.command.name, query, text))
