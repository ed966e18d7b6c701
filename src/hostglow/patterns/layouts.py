"""LED layout strategies.

Both layouts turn one metric value into ``size`` colors, ordered by
physical LED index.

Gradient (fill bar), value=0.5, size=5::

    index:   0    1    2     3     4
    color:  end  end  half  start start

Block, any value::

    index:   0      1      2      3      4
    color:  blend  blend  blend  blend  blend
"""

from hostglow.models import Color, Layout

from .interpolate import clamp, lerp_color


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"LED count must not be negative, got {size}")


def gradient_colors(value: float, start_color: Color, end_color: Color, size: int) -> list[Color]:
    """
    Render a fill bar.

    The value is scaled to a fill position ``value * size``. LEDs fully
    below it get the end color, the LED straddling it is blended, and the
    rest keep the start color.
    """
    _check_size(size)
    scaled_value = value * size
    return [
        lerp_color(clamp(scaled_value - index), start_color, end_color)
        for index in range(size)
    ]


def block_colors(value: float, start_color: Color, end_color: Color, size: int) -> list[Color]:
    """Render one blended color repeated over every LED."""
    _check_size(size)
    return [lerp_color(value, start_color, end_color)] * size


_LAYOUTS = {
    Layout.GRADIENT: gradient_colors,
    Layout.BLOCK: block_colors,
}


def render_layout(
    layout: Layout, value: float, start_color: Color, end_color: Color, size: int
) -> list[Color]:
    """Render ``size`` colors with the given layout."""
    return _LAYOUTS[layout](value, start_color, end_color, size)
