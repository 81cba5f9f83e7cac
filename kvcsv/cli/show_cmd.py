# kvcsv/cli/show_cmd.py

"""
CLI commands for inspecting merged settings: ``kvcsv show`` and ``kvcsv get``.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

import click
from rich.console import Console
from rich.table import Table

from kvcsv.core import LayeredTable, format_value
from kvcsv.core.coercion import value_type_name
from kvcsv.errors import KeyNotFoundError, ParseError
from .base_cmd import get_config

logger = logging.getLogger(__name__)
console = Console()

PARSE_ERROR_EXIT_CODE = 2
MISSING_KEY_EXIT_CODE = 1

# --- Helper Functions ---

def _resolve_sources(ctx: click.Context, sources: Tuple[Path, ...]) -> List[Path]:
    """Sources from the command line, or the configured default layers."""
    if sources:
        return list(sources)
    configured = get_config(ctx).sources.files
    logger.info(f"No sources given, using {len(configured)} configured source(s).")
    return list(configured)


def _build_table(ctx: click.Context, sources: Sequence[Path]) -> LayeredTable:
    try:
        table = LayeredTable.from_sources(sources)
    except ParseError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(PARSE_ERROR_EXIT_CODE)
    skipped = len(sources) - len(table.sources)
    if skipped:
        logger.info(f"{skipped} source(s) not found and skipped.")
    return table

# --- Commands ---

@click.command("show")
@click.argument("sources", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--only-set", is_flag=True, default=False, help="Hide entries whose value is null.")
@click.pass_context
def show_cmd(ctx: click.Context, sources: Tuple[Path, ...], only_set: bool):
    """
    Merge SOURCES (lowest priority first) and print the resulting settings.

    Missing files are skipped. Without SOURCES, the files listed under
    [sources] in kvcsv.toml are used.
    """
    table = _build_table(ctx, _resolve_sources(ctx, sources))
    entries = table.filter(lambda _k, v: v is not None) if only_set else table.to_dict()

    if not entries:
        console.print("[yellow]No settings found.[/yellow]")
        return

    rich_table = Table(title="Settings")
    rich_table.add_column("Key", style="cyan", no_wrap=True)
    rich_table.add_column("Value", style="magenta")
    rich_table.add_column("Type", style="green")
    for key in sorted(entries):
        value = entries[key]
        rich_table.add_row(key, format_value(value), value_type_name(value))
    console.print(rich_table)


@click.command("get")
@click.argument("key")
@click.argument("sources", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--default", "default", default=None, help="Value to print when KEY is not set.")
@click.pass_context
def get_cmd(ctx: click.Context, key: str, sources: Tuple[Path, ...], default):
    """
    Print the merged value of KEY from SOURCES.

    Exits with status 1 if KEY is absent and no --default is given.
    """
    table = _build_table(ctx, _resolve_sources(ctx, sources))
    try:
        if default is None:
            value = table.fetch(key)
        else:
            value = table.fetch(key, default)
    except KeyNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(MISSING_KEY_EXIT_CODE)
    click.echo(format_value(value))
