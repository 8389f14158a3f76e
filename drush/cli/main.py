"""
CLI interface for Drush
"""
import sys

import click
from rich.console import Console

from ..core.bootstrap import build_container
from ..core.commands import CommandFactory
from ..core.config import Config
from ..core.errors import DrushError
from ..core.facade import facade
from . import commands

console = Console(stderr=True)


@click.group()
@click.option('--simulate', '-s', is_flag=True, help='Simulate all relevant actions (do not actually change the system)')
@click.option('--verbose', '-v', count=True, help='Increase verbosity (-v, -vv, -vvv)')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.option('--debug', '-d', is_flag=True, help='Show debug output')
@click.option('--root', '-r', type=click.Path(file_okay=False), default=None, help='Site root directory')
@click.pass_context
def cli(ctx, simulate, verbose, quiet, debug, root):
    """Drush - command line shell for site administration"""
    options = {
        "simulate": simulate or Config.SIMULATE,
        "root": root or Config.ROOT,
    }
    container = build_container(ctx.command, options, verbose=verbose, quiet=quiet, debug=debug)
    facade.set_container(container)
    # Paired with set_container so the next invocation starts clean
    ctx.call_on_close(facade.unset_container)


CommandFactory().add_to(cli, commands)


def main():
    """Console script entry point"""
    try:
        exit_code = facade.runner().run()
    except DrushError as e:
        console.print(f"[bold red]❌ Error:[/bold red] {e}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
