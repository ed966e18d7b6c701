"""Enumerations for device recipes."""

from enum import Enum


class MetricSource(str, Enum):
    """Which host metric drives a device."""

    CPU = "cpu"          # Smoothed CPU non-idle fraction
    MEMORY = "memory"    # Instantaneous memory used/total


class Layout(str, Enum):
    """How a metric value is spread over a run of LEDs."""

    GRADIENT = "gradient"  # Fill bar: LEDs below the fill position take the end color
    BLOCK = "block"        # Every LED takes the same blended color
