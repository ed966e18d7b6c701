"""Data models for hostglow."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .controller import ControllerInfo
from .enums import Layout, MetricSource
from .metrics import MetricSnapshot
from .recipe import DeviceRecipe, Segment

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    # Models
    "Color",
    "ControllerInfo",
    "DeviceRecipe",
    # Enums
    "Layout",
    "MetricSnapshot",
    "MetricSource",
    "Segment",
]
