"""Lighting service protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from hostglow.models import Color, ControllerInfo


class LightingConnection(Protocol):
    """An open connection to an RGB lighting service."""

    def controller_count(self) -> int:
        """Number of controllers currently known to the service."""
        ...

    def controller(self, controller_id: int) -> ControllerInfo:
        """Name and LED count of one controller."""
        ...

    def update_leds(self, controller_id: int, colors: Sequence[Color]) -> None:
        """
        Set every LED of a controller.

        Args:
            controller_id: Controller index (0 to controller_count() - 1)
            colors: One color per LED, in LED index order
        """
        ...

    def close(self) -> None:
        ...


# Opens a connection; raises LightingConnectionError when the service is unreachable
Connector = Callable[[], LightingConnection]
