"""hostglow: host CPU and memory load shown on OpenRGB lighting."""

__version__ = "0.1.0"

from .core import HostMonitor

__all__ = ["HostMonitor"]
