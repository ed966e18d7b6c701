"""Color interpolation and LED layout generation."""

from .interpolate import clamp, lerp, lerp_color
from .layouts import block_colors, gradient_colors, render_layout

__all__ = [
    "block_colors",
    "clamp",
    "gradient_colors",
    "lerp",
    "lerp_color",
    "render_layout",
]
