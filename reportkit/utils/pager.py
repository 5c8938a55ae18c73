"""Output paging utilities."""

import logging
import os
import shutil
import subprocess
import sys

import click

logger = logging.getLogger(__name__)

# Formats meant for humans; machine-readable output is never paged
PAGED_FORMATS = {"text"}


def _find_pager():
    return os.environ.get('PAGER') or shutil.which('less') or shutil.which('more')


def page_output(text: str, use_pager: bool = True):
    """Display text using a pager if available and enabled.

    Respects the $PAGER environment variable, falls back to 'less' or
    'more', and echoes directly when stdout is not a TTY or no pager exists.

    Args:
        text: Text to display
        use_pager: Enable paging (default: True)
    """
    pager = _find_pager() if use_pager and sys.stdout.isatty() else None
    if not pager:
        click.echo(text, nl=not text.endswith("\n"))
        return

    env = os.environ.copy()
    if 'less' in pager.lower() and 'LESS' not in env:
        # -R: allow ANSI color codes
        # -F: quit if output fits on one screen
        # -X: don't clear screen on exit
        env['LESS'] = '-RFX'

    try:
        proc = subprocess.Popen(pager, stdin=subprocess.PIPE, env=env, shell=True)
        proc.communicate(input=text.encode('utf-8'))
    except (IOError, OSError) as e:
        logger.debug(f"Pager {pager!r} failed: {e}")
        click.echo(text, nl=not text.endswith("\n"))


def should_page(config, format_name: str) -> bool:
    """Determine if output should be paged.

    Args:
        config: ReportConfig instance
        format_name: Format the output was rendered in

    Returns:
        True if paging should be used
    """
    if format_name not in PAGED_FORMATS:
        return False

    return config.page_output
