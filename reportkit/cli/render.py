"""Report rendering commands."""

import click
from rich.markup import escape

from ..data import load_table
from ..exceptions import ReportError
from ..renderers import GroupingRenderer, TableRenderer
from ..utils import page_output, parse_column_list, rich_echo, should_page, validate_output_path


@click.command('render')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--group-by', help='Split the table into groups on this column')
@click.option('--columns', help='Comma-separated list of columns to include')
@click.option('--title', help='Report title')
@click.option('--output', '-o', help='Save the report to this file instead of printing it')
@click.pass_context
def render(ctx, path, group_by, columns, title, output):
    """Render a JSON or CSV data file as a report.

    \b
    Examples:
        reportkit render sales.json
        reportkit -f csv render sales.json --group-by region
        reportkit render sales.csv --columns name,amount --title "Q3 Sales"
        reportkit -f json render sales.csv -o sales_report.json
    """
    config = ctx.obj['config']
    output_format = ctx.obj['format']

    try:
        column_names = parse_column_list(columns)
        table = load_table(path, column_names=column_names)

        renderer = TableRenderer
        data = table
        if group_by:
            if group_by not in table.column_names:
                raise click.BadParameter(f"Unknown column: {group_by}", param_hint='--group-by')
            renderer = GroupingRenderer
            data = table.group_by(group_by)

        options = {
            'data': data,
            'title': title,
            'use_colors': config.use_colors and not output,
            'show_table_headers': config.show_table_headers,
            'pretty': config.pretty_json,
        }

        if output:
            target = validate_output_path(output)
            rendered = []
            renderer.render(output_format, options, callback=rendered.append)
            rendered[0].formatter.save_output(target)
            rich_echo(f"[green]Saved {output_format} report to {target}[/green]",
                      use_colors=config.use_colors)
            return

        report = renderer.render(output_format, options)

        if should_page(config, output_format):
            page_output(report, use_pager=config.page_output)
        else:
            click.echo(report, nl=False)

    except (ReportError, ValueError, OSError) as e:
        rich_echo(f"[red]Error:[/red] {escape(str(e))}", err=True, use_colors=config.use_colors)
        ctx.exit(1)
