# kvcsv/cli/base_cmd.py

"""
Base setup for CLI commands: configuration loading and logging initialization.
"""

import logging
from pathlib import Path
from typing import List

import click

from kvcsv.config import load_configuration, KvcsvConfig
from kvcsv.errors import ConfigError
from kvcsv.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _verbosity(ctx: click.Context) -> int:
    """Verbosity from -q/-v on this command, falling back to the parent group."""
    for params in (ctx.params, ctx.parent.params if ctx.parent else {}):
        if params.get('quiet'):
            return -1
        if params.get('verbose', 0) > 0:
            return params['verbose']
    return 0


class ConfigGroup(click.Group):
    """
    A Click Group that loads configuration and sets up logging before
    invoking its subcommands. The config is passed on via ``ctx.obj['config']``.
    """
    def invoke(self, ctx: click.Context):
        if ctx.obj is None:
            ctx.obj = {}

        if 'config' not in ctx.obj:
            extra_files: List[Path] = list(ctx.params.get('config_files') or ())
            try:
                config = load_configuration(config_files=extra_files)
            except ConfigError as e:
                click.echo(f"Configuration error: {e}", err=True)
                ctx.exit(1)
            ctx.obj['config'] = config
            setup_logging(config, _verbosity(ctx))
            logger.debug("Logging setup complete in ConfigGroup.")
        else:
            logger.debug("Configuration already loaded in context.")

        return super().invoke(ctx)


def get_config(ctx: click.Context) -> KvcsvConfig:
    """Returns the config loaded by ConfigGroup (defaults if invoked standalone)."""
    obj = ctx.find_object(dict) or {}
    return obj.get('config') or KvcsvConfig()


# --- Common CLI Options ---
verbose_option = click.option(
    '-v', '--verbose',
    count=True,
    help="Increase verbosity level (-v for INFO, -vv for DEBUG)."
)
quiet_option = click.option(
    '-q', '--quiet',
    is_flag=True,
    default=False,
    help="Suppress all console log output."
)
config_option = click.option(
    '-c', '--config', 'config_files',
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Additional kvcsv.toml file to load (repeatable, later files win)."
)
