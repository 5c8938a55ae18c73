"""Main CLI entry point for reportkit command."""

import logging

import click
from rich.markup import escape

from .. import formatters  # noqa: F401  registers the built-in formatters
from ..config import ConfigManager, ReportConfig
from ..exceptions import ReportConfigError
from ..utils import rich_echo, validate_format_name

__version__ = "0.4.0"


@click.group()
@click.option('--format', '-f', 'output_format', envvar='REPORTKIT_FORMAT',
              help='Output format: text, csv, json or html (default: from config or text)')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(version=__version__, prog_name='reportkit')
@click.pass_context
def cli(ctx, output_format, no_color, verbose):
    """reportkit - Render tabular data as text, CSV, JSON or HTML reports.

    \b
    Examples:
        # Show which formats each renderer supports
        reportkit formats

        # Print a table report
        reportkit render sales.json

        # Group rows by a column and emit CSV
        reportkit -f csv render sales.json --group-by region

    \b
    Configuration:
        Configuration file: ~/.reportkit/config.json
        Environment variables: REPORTKIT_FORMAT
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = ConfigManager.load(verbose=verbose)
    except ReportConfigError as e:
        rich_echo(f"[yellow]Warning:[/yellow] {escape(str(e))}", err=True)
        config = ReportConfig()

    if no_color:
        config.use_colors = False

    try:
        output_format = validate_format_name(output_format or config.default_format)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--format') from e

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose
    ctx.obj['format'] = output_format


# Import and register command groups
from . import (
    config as config_commands,
    formats,
    render,
)

cli.add_command(formats.formats)
cli.add_command(render.render)
cli.add_command(config_commands.config)


@cli.command('version')
def version_cmd():
    """Show version information."""
    click.echo(f"reportkit version {__version__}")
    click.echo("Pluggable report formatters for tabular data")


if __name__ == '__main__':
    cli()
