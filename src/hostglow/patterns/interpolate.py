"""Linear color interpolation."""

import math

from hostglow.models import Color


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def lerp(value: float, start: float, end: float) -> float:
    """
    Interpolate between start and end.

    Args:
        value: Blend factor, clamped to [0, 1] before use
        start: Result at value 0
        end: Result at value 1
    """
    value = clamp(value)
    return start + value * (end - start)


def _round_half_away(value: float) -> int:
    # Channel blends are never negative, so half-up is half-away-from-zero
    return int(math.floor(value + 0.5))


def lerp_color(value: float, start_color: Color, end_color: Color) -> Color:
    """
    Blend two colors channel by channel.

    Example:
        >>> lerp_color(0.5, Color(r=127, g=127, b=127), Color(r=127, g=0, b=0))
        Color(r=127, g=64, b=64)
    """
    return Color(
        r=_round_half_away(lerp(value, start_color.r, end_color.r)),
        g=_round_half_away(lerp(value, start_color.g, end_color.g)),
        b=_round_half_away(lerp(value, start_color.b, end_color.b)),
    )
