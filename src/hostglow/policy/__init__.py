"""Per-device lighting policy."""

from .dispatcher import DevicePolicyDispatcher
from .table import DEFAULT_RECIPES, RED, WHITE

__all__ = ["DEFAULT_RECIPES", "RED", "WHITE", "DevicePolicyDispatcher"]
