"""Core monitoring loop."""

from .monitor import HostMonitor

__all__ = ["HostMonitor"]
