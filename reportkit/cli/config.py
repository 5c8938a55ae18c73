"""Configuration file commands."""

import json

import click
from rich.markup import escape

from ..config import ConfigManager
from ..exceptions import ReportConfigError
from ..utils import rich_echo


@click.group('config')
def config():
    """Configuration file commands.

    The configuration file lives at ~/.reportkit/config.json.
    """
    pass


@config.command('init')
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.pass_context
def init_config(ctx, force):
    """Write a config file with default values.

    \b
    Examples:
        reportkit config init
        reportkit config init --force
    """
    path = ConfigManager.get_config_path()

    try:
        created = ConfigManager.init_config(force=force)
    except ReportConfigError as e:
        rich_echo(f"[red]Error:[/red] {escape(str(e))}", err=True)
        ctx.exit(1)
        return

    if created:
        rich_echo(f"[green]Wrote default config to {path}[/green]")
    else:
        rich_echo(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")


@config.command('show')
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as JSON."""
    click.echo(json.dumps(ctx.obj['config'].to_dict(), indent=2))


@config.command('path')
def config_path():
    """Print the configuration file path."""
    click.echo(str(ConfigManager.get_config_path()))
