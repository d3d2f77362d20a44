"""Main CLI entry point for ackrc."""

import logging
import click
from .commands.files import files
from .commands.dump import dump
from .commands.version import version as version_command
from ..platform import SUPPORTED_PLATFORMS
from ..utils.logging import setup_logging, get_logger
from .. import __version__

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="ackrc", message="%(prog)s version %(version)s")
@click.option('--platform', 'platform_name', type=click.Choice(sorted(SUPPORTED_PLATFORMS)),
              default=None, help='Platform conventions to use (default: detect)')
@click.option('--verbose', '-v', is_flag=True, help='Log discovery steps to stderr')
@click.pass_context
def cli(ctx, platform_name, verbose):
    """ackrc - Locate and read layered .ackrc files."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"platform": platform_name}


cli.add_command(files)
cli.add_command(dump)
cli.add_command(version_command)
