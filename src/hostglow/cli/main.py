"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from hostglow import __version__
from hostglow.core import HostMonitor
from hostglow.exceptions import HostGlowError
from hostglow.models import DEFAULT_CONFIG_PATH, AppConfig

from .commands import config, devices, sample
from .errors import exit_with_error

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path.home() / ".hostglow" / "logs" / "hostglow.log"

# Handlers installed by setup_logging, replaced on every call
_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Console output goes to stderr; everything at ``log_level`` and above
    also goes to a rotating log file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG) for the console
        debug: If True, log DEBUG everywhere and write ./hostglow-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        console_level = logging.DEBUG
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "hostglow-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_path = DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = [file_handler, console_handler]

    root_logger.setLevel(min(file_level, console_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={logging.getLevelName(file_level)} ({log_path})"
    )
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="hostglow")
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file'
)
@click.option('--host', type=str, default=None, help='OpenRGB server address (overrides config)')
@click.option('--port', type=int, default=None, help='OpenRGB server port (overrides config)')
@click.option(
    '--ticks',
    type=click.IntRange(min=1),
    default=None,
    help='Stop after N sampling ticks (default: run forever)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase console verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./hostglow-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    envvar='HOSTGLOW_LOG_LEVEL',
    show_envvar=True,
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Path,
    host: Optional[str],
    port: Optional[int],
    ticks: Optional[int],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    hostglow - show host CPU and memory load on your RGB hardware.

    Samples CPU usage (averaged over a few seconds) and memory usage, and
    paints them onto devices managed by an OpenRGB server. Start OpenRGB
    with its SDK server enabled (openrgb --server) first.

    \b
    Examples:
      # Run the monitor against a local OpenRGB server
      hostglow

      # Remote server, console INFO logging
      hostglow --host 192.168.1.20 -v

      # See which devices hostglow recognizes
      hostglow devices

      # Print metrics without touching the lights
      hostglow sample --count 10
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)

    try:
        app_config = AppConfig.load_or_default(config_path)
    except HostGlowError as e:
        exit_with_error(e, log_path)

    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if overrides:
        app_config = app_config.model_copy(update=overrides)

    ctx.obj = {
        "config": app_config,
        "config_path": config_path,
        "log_path": log_path,
    }

    if ctx.invoked_subcommand is not None:
        return

    logger.info(f"Starting hostglow {__version__}")

    monitor = HostMonitor(app_config)
    try:
        monitor.run(max_ticks=ticks)
    except KeyboardInterrupt:
        logger.info("Monitor interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        exit_with_error(e, log_path)


cli.add_command(config)
cli.add_command(devices)
cli.add_command(sample)

if __name__ == "__main__":
    cli()
