"""
Core commands for the Drush CLI
Every command reaches its services through the facade
"""
import json

import click

from ..core.facade import facade


@click.command()
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
def version(output_format):
    """Show drush version"""
    drush_version = facade.get_version()
    if output_format == 'json':
        click.echo(json.dumps({
            "drush-version": drush_version,
            "major": facade.get_major_version(),
            "minor": facade.get_minor_version(),
        }))
    else:
        click.echo(f"Drush version : {drush_version}")


@click.command()
def status():
    """Show the selected bootstrap and runtime flags"""
    boot = facade.bootstrap()
    output = facade.output()
    rows = [
        ("Drush version", facade.get_version()),
        ("Drush root", facade.config().get("options.root") or "-"),
        ("Bootstrap", boot.name),
        ("Simulated", "yes" if facade.simulate() else "no"),
        ("Verbose", "yes" if facade.verbose() else "no"),
        ("Debug", "yes" if facade.debug() else "no"),
    ]
    for label, value in rows:
        output.write(f"{label:<14}: {value}", markup=False, highlight=False)
    facade.logger().info(f"Status reported for boot '{boot.name}'")


@click.command(name='config')
def show_config():
    """Show current configuration"""
    output = facade.output()
    values = facade.config().export()
    if not values:
        output.write("No configuration values set.")
        return
    for key in sorted(values):
        output.write(f"{key} = {values[key]!r}", markup=False, highlight=False)
