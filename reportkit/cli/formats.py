"""Formatter registry listing command."""

import click

from ..data import Table
from ..registry import get_formatter_registry
from ..renderers import TableRenderer


@click.command('formats')
@click.pass_context
def formats(ctx):
    """List registered formats for every renderer.

    \b
    Examples:
        reportkit formats
    """
    config = ctx.obj['config']
    registry = get_formatter_registry()

    records = []
    for renderer in registry.renderers():
        for name, formatter in sorted(registry.renderer_formats(renderer).items()):
            records.append({
                'Renderer': renderer.__name__,
                'Format': name,
                'Formatter': formatter.__name__,
            })

    report = TableRenderer.render(
        'text',
        data=Table.from_records(records, column_names=['Renderer', 'Format', 'Formatter']),
        title=f"Registered formats ({len(records)} total)",
        use_colors=config.use_colors,
        registry=registry,
    )
    click.echo(report, nl=False)
