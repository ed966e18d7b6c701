"""Terminal error reporting for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from hostglow.exceptions import format_error_for_display

logger = logging.getLogger(__name__)


def exit_with_error(error: Exception, log_path: Optional[Path] = None) -> NoReturn:
    """
    Show a clean error message (no traceback) and exit with status 1.

    Args:
        error: The exception that stopped the command
        log_path: Log file to point the user at for details
    """
    logger.error(f"Fatal error: {error}", exc_info=error)

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)
