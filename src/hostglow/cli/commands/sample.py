"""Sample command - print host metrics without touching the lights."""

import click

from hostglow.cli.errors import exit_with_error
from hostglow.exceptions import HostGlowError
from hostglow.sampling import MetricSampler, SlidingWindow


@click.command(name="sample")
@click.option(
    '--count', '-n',
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help='Number of sampling ticks to print'
)
@click.pass_obj
def sample(obj, count: int):
    """
    Print smoothed CPU and memory utilization.

    Uses the same window and interval as the monitor, so the CPU average
    settles after the first few seconds.
    """
    app_config = obj["config"]
    sampler = MetricSampler(
        SlidingWindow(app_config.window_size),
        sample_interval=app_config.sample_interval,
    )

    try:
        for i in range(count):
            snapshot = sampler.sample()
            click.echo(
                f"[{i + 1}/{count}] cpu {snapshot.cpu:6.1%}  memory {snapshot.memory:6.1%}"
            )
    except KeyboardInterrupt:
        click.echo("\nStopped.", err=True)
    except HostGlowError as e:
        exit_with_error(e, obj["log_path"])
