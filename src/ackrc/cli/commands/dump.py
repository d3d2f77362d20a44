"""Dump command - show every rc file and the option lines it contributes."""

import json as json_lib
import sys
import click
from ...config import load_rc_arguments
from ...utils.errors import AckrcError, ConfigConflictError
from ...utils.logging import get_logger
from ..utils import build_finder, format_error

logger = get_logger("cli.dump")


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.pass_obj
def dump(obj, as_json):
    """Dump the option lines of each rc file, in load order."""
    try:
        sources = load_rc_arguments(build_finder(obj))
        
        if as_json:
            data = [
                {**config.model_dump(mode="json"), "lines": lines}
                for config, lines in sources
            ]
            click.echo(json_lib.dumps(data, indent=2))
            return
        
        for config, lines in sources:
            label = config.scope.value.title()
            click.echo(f"{label}: {config.path}")
            click.echo("=" * (len(label) + len(config.path) + 2))
            for line in lines:
                click.echo(f"  {line}")
            click.echo("")
    
    except ConfigConflictError as e:
        click.echo(format_error(str(e), f"Keep either .ackrc or _ackrc in {e.directory}"), err=True)
        sys.exit(1)
    except AckrcError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
