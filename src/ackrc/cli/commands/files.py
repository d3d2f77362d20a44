"""Files command - list discovered rc files in precedence order."""

import json as json_lib
import sys
import click
from ...utils.errors import AckrcError
from ...utils.logging import get_logger
from ..utils import build_finder, format_error

logger = get_logger("cli.files")


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.pass_obj
def files(obj, as_json):
    """List rc files that would be loaded, in order."""
    try:
        configs = build_finder(obj).find_config_files()
        
        if as_json:
            data = [config.model_dump(mode="json") for config in configs]
            click.echo(json_lib.dumps(data, indent=2))
            return
        
        if not configs:
            click.echo("No rc files found.", err=True)
            return
        
        for config in configs:
            click.echo(f"{config.scope.value.lower():<8} {config.path}")
    
    except AckrcError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
