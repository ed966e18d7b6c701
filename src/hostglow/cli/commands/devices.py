"""Devices command - list controllers and the recipe each one gets."""

import click

from hostglow.cli.errors import exit_with_error
from hostglow.exceptions import HostGlowError
from hostglow.lighting import OpenRGBConnection
from hostglow.policy import DevicePolicyDispatcher


def describe_policy(dispatcher: DevicePolicyDispatcher, name: str, led_count: int) -> str:
    """Human-readable summary of what the monitor will do with a device."""
    if led_count == 0:
        return "skipped (no LEDs)"

    recipe = dispatcher.recipe_for(name)
    if recipe is None:
        return "skipped (unknown device)"
    if recipe.is_excluded:
        return "excluded"

    runs = recipe.plan(led_count)
    if runs is None:
        return f"skipped (recipe needs {recipe.fixed_led_count} LEDs)"

    parts = []
    for layout, size in runs:
        if parts and parts[-1][0] == layout.value and parts[-1][1] == size:
            parts[-1][2] += 1
        else:
            parts.append([layout.value, size, 1])
    plan = " + ".join(
        f"{layout} {size}" if count == 1 else f"{count} x {layout} {size}"
        for layout, size, count in parts
    )
    colors = f"{recipe.start_color.to_hex()} -> {recipe.end_color.to_hex()}"
    return f"{recipe.metric.value}: {plan} ({colors})"


@click.command(name="devices")
@click.pass_obj
def devices(obj):
    """List OpenRGB controllers and how hostglow will light them."""
    app_config = obj["config"]
    dispatcher = DevicePolicyDispatcher()

    try:
        connection = OpenRGBConnection.connect(
            app_config.host, app_config.port, app_config.client_name
        )
    except HostGlowError as e:
        exit_with_error(e, obj["log_path"])

    try:
        count = connection.controller_count()
        click.echo(f"OpenRGB controllers at {app_config.host}:{app_config.port}:\n")
        if count == 0:
            click.echo("  No controllers found.")
        for controller_id in range(count):
            controller = connection.controller(controller_id)
            policy = describe_policy(dispatcher, controller.name, controller.led_count)
            click.echo(
                f"  [{controller_id}] {controller.name} "
                f"({controller.led_count} LEDs) -> {policy}"
            )
    except HostGlowError as e:
        exit_with_error(e, obj["log_path"])
    finally:
        connection.close()
