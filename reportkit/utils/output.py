"""Console output helpers for the reportkit CLI."""

import sys
from rich.console import Console


def rich_echo(message: str, err: bool = False, markup: bool = True, use_colors: bool = True) -> None:
    """Echo a message with Rich markup support.

    Markup tags like [red] or [cyan] are rendered before the message is
    written, so CLI commands can share one styled output path.

    Args:
        message: Message to print (may contain Rich markup)
        err: If True, print to stderr instead of stdout
        markup: If True, parse Rich markup tags (default: True)
        use_colors: If False, strip styling from the output
    """
    file = sys.stderr if err else sys.stdout
    console = Console(file=file, markup=markup, no_color=not use_colors)
    console.print(message, markup=markup, highlight=False)
