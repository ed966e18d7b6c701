"""Device policy dispatch: device name to LED colors."""

import logging
from collections.abc import Mapping
from typing import Optional

from hostglow.models import Color, DeviceRecipe, MetricSnapshot
from hostglow.patterns import render_layout

from .table import DEFAULT_RECIPES

logger = logging.getLogger(__name__)


class DevicePolicyDispatcher:
    """
    Stateless lookup-and-render step run once per device per tick.

    An empty result means "leave this device alone this tick". Unknown
    devices, devices without LEDs and devices whose LED count does not
    fit their recipe all produce an empty result and a warning; none of
    them is an error, so the physical device set can change freely.
    """

    def __init__(self, recipes: Optional[Mapping[str, DeviceRecipe]] = None):
        self.recipes = DEFAULT_RECIPES if recipes is None else recipes

    def recipe_for(self, name: str) -> Optional[DeviceRecipe]:
        """Return the recipe for a device name, or None if it is unknown."""
        return self.recipes.get(name)

    def render(self, name: str, led_count: int, snapshot: MetricSnapshot) -> list[Color]:
        """
        Compute the full color list for one device.

        Args:
            name: Device name reported by the lighting service
            led_count: Number of LEDs the device reports
            snapshot: Metrics for this tick

        Returns:
            Exactly ``led_count`` colors, or an empty list to skip the device
        """
        if led_count == 0:
            logger.warning(f"Controller {name} has no LEDs")
            return []

        recipe = self.recipe_for(name)
        if recipe is None:
            logger.warning(f"Unknown controller: {name}")
            return []

        if recipe.is_excluded:
            logger.debug(f"Controller {name} is excluded, leaving its LEDs untouched")
            return []

        runs = recipe.plan(led_count)
        if runs is None:
            logger.warning(
                f"Controller {name} reports {led_count} LEDs but its recipe "
                f"needs {recipe.fixed_led_count}, skipping"
            )
            return []

        value = snapshot.value_for(recipe.metric)
        colors: list[Color] = []
        for layout, size in runs:
            colors.extend(
                render_layout(layout, value, recipe.start_color, recipe.end_color, size)
            )
        return colors
