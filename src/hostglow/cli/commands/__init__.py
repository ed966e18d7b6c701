"""CLI commands for hostglow."""

from .config import config
from .devices import devices
from .sample import sample

__all__ = ["config", "devices", "sample"]
