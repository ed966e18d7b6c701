"""Device recipe table.

Maps OpenRGB controller names to how they are lit. Names must match what
the OpenRGB server reports exactly; run ``hostglow devices`` to list them.
"""

from types import MappingProxyType

from hostglow.models import Color, DeviceRecipe, Layout, MetricSource, Segment

WHITE = Color(r=127, g=127, b=127)
RED = Color(r=127, g=0, b=0)

# Commander Core: 24-LED pump ring followed by six fan ports of 5 LEDs each
COMMANDER_CORE_RING_LEDS = 24
COMMANDER_CORE_PORTS = 6
COMMANDER_CORE_PORT_LEDS = 5

DEFAULT_RECIPES = MappingProxyType({
    "Corsair Dominator Platinum": DeviceRecipe.single(
        MetricSource.MEMORY, Layout.GRADIENT, WHITE, RED
    ),
    "Corsair Commander Core": DeviceRecipe(
        metric=MetricSource.CPU,
        start_color=WHITE,
        end_color=RED,
        segments=(
            Segment(layout=Layout.GRADIENT, size=COMMANDER_CORE_RING_LEDS),
            Segment(
                layout=Layout.BLOCK,
                size=COMMANDER_CORE_PORT_LEDS,
                repeat=COMMANDER_CORE_PORTS,
            ),
        ),
    ),
    "G502 HERO Gaming Mouse": DeviceRecipe.single(
        MetricSource.CPU, Layout.BLOCK, WHITE, RED
    ),
    # Motherboard lighting is left to its own effects
    "MSI X670E GAMING PLUS WIFI (MS-7E16)": DeviceRecipe.excluded(),
})
