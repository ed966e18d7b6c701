"""
Config commands.

Commands:
    - config show      # Display the effective configuration
    - config path      # Print the config file location
    - config init      # Write a config file with default values
"""

import click

from hostglow.cli.errors import exit_with_error
from hostglow.models import AppConfig


@click.group(name="config")
def config():
    """Inspect or create the hostglow configuration file."""
    pass


@config.command(name="show")
@click.pass_obj
def show(obj):
    """Display the effective configuration (file values plus overrides)."""
    app_config = obj["config"]
    click.echo(f"Configuration ({obj['config_path']}):\n")
    for name, field in AppConfig.model_fields.items():
        click.echo(f"  {name}: {getattr(app_config, name)}")
        if field.description:
            click.echo(f"      {field.description}")
    click.echo(f"\n  window_size: {app_config.window_size} samples")


@config.command(name="path")
@click.pass_obj
def path(obj):
    """Print the configuration file path."""
    click.echo(str(obj["config_path"]))


@config.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing file (a .bak copy is kept)')
@click.pass_obj
def init(obj, force: bool):
    """Write a configuration file with default values."""
    config_path = obj["config_path"]
    if config_path.exists() and not force:
        click.echo(f"{config_path} already exists (use --force to overwrite)", err=True)
        raise click.exceptions.Exit(1)

    try:
        AppConfig().save(config_path)
    except OSError as e:
        exit_with_error(e, obj["log_path"])
    click.echo(f"Wrote default configuration to {config_path}")
