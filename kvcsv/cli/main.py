# kvcsv/cli/main.py

"""
Main entry point for the kvcsv CLI.
Uses Click for command-line interface handling.
"""

import logging

import click

from kvcsv.version import __version__
from .base_cmd import ConfigGroup, config_option, verbose_option, quiet_option
from .show_cmd import show_cmd, get_cmd

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS, cls=ConfigGroup)
@click.version_option(__version__, '-V', '--version', package_name='kvcsv', prog_name='kvcsv')
@config_option
@verbose_option
@quiet_option
@click.pass_context
def main_cli(ctx, config_files, verbose: int, quiet: bool):
    """
    kvcsv: inspect layered key/value CSV settings.

    Sources are merged in the order given; later files override earlier
    ones and missing files are skipped.

    Tool configuration is loaded from:
    Defaults -> --config files -> ./kvcsv.toml -> ~/.config/kvcsv/kvcsv.toml -> KVCSV_* env vars
    """
    logger.debug(f"kvcsv CLI group invoked with {len(config_files)} extra config file(s).")


main_cli.add_command(show_cmd)
main_cli.add_command(get_cmd)

cli = main_cli

if __name__ == "__main__":
    cli()
