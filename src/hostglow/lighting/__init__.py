"""Connection to the RGB lighting service."""

from .openrgb import OpenRGBConnection
from .protocols import Connector, LightingConnection
from .retry import connect_with_retry

__all__ = ["Connector", "LightingConnection", "OpenRGBConnection", "connect_with_retry"]
