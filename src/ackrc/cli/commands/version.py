"""Version command - show ackrc version."""

import click
from ... import __version__


@click.command()
def version():
    """Show ackrc version."""
    click.echo(f"ackrc version {__version__}")
