"""OpenRGB SDK server connection."""

import logging
from collections.abc import Sequence

from openrgb import OpenRGBClient
from openrgb.utils import ModeColors, RGBColor

from hostglow.exceptions import LedUpdateError, LightingConnectionError, LightingServiceError
from hostglow.models import Color, ControllerInfo

logger = logging.getLogger(__name__)


def _per_led_mode(modes):
    """Pick the mode used for LED updates, preferring the one named 'Direct'."""
    per_led = [mode for mode in modes if mode.color_mode == ModeColors.PER_LED]
    for mode in per_led:
        if mode.name.lower() == "direct":
            return mode
    return per_led[0] if per_led else None


class OpenRGBConnection:
    """
    LightingConnection backed by an ``openrgb.OpenRGBClient``.

    Socket errors from the client are translated into hostglow
    exceptions: failures while connecting are recoverable
    LightingConnectionErrors, failures afterwards are fatal.
    """

    def __init__(self, client: OpenRGBClient):
        self._client = client
        self._no_per_led: set[int] = set()

    @classmethod
    def connect(cls, host: str, port: int, client_name: str) -> "OpenRGBConnection":
        """
        Open a connection to an OpenRGB server.

        Raises:
            LightingConnectionError: If the server cannot be reached
        """
        logger.info(f"Connecting to OpenRGB server at {host}:{port}...")
        try:
            client = OpenRGBClient(address=host, port=port, name=client_name)
        except OSError as e:
            raise LightingConnectionError(host, port, original_error=str(e)) from e
        return cls(client)

    def controller_count(self) -> int:
        """Refresh the device list from the server and count it."""
        try:
            self._client.update()
        except OSError as e:
            raise LightingServiceError(
                user_message="Lost connection to the OpenRGB server",
                technical_message=f"Failed to refresh OpenRGB device list: {e}",
                recovery_hint="Check that the OpenRGB server is still running and restart hostglow",
            ) from e
        return len(self._client.devices)

    def controller(self, controller_id: int) -> ControllerInfo:
        device = self._client.devices[controller_id]
        return ControllerInfo(name=device.name, led_count=len(device.leds))

    def update_leds(self, controller_id: int, colors: Sequence[Color]) -> None:
        """
        Send one color per LED to a controller.

        Devices running an effect or a mode-specific color are switched to
        a per-LED mode first. Devices that have no per-LED mode are left
        alone (a warning is logged once per controller).

        Raises:
            LedUpdateError: If the mode switch or the LED update fails
        """
        device = self._client.devices[controller_id]
        if not self._ensure_per_led_mode(controller_id, device):
            return

        try:
            device.set_colors(
                [RGBColor(*color.to_rgb_tuple()) for color in colors],
                fast=True,
            )
        except (OSError, IndexError) as e:
            raise LedUpdateError(controller_id, original_error=str(e)) from e

    def _ensure_per_led_mode(self, controller_id: int, device) -> bool:
        """Switch the device to a per-LED mode if needed. False if it has none."""
        active = device.modes[device.active_mode] if device.modes else None
        if active is not None and active.color_mode == ModeColors.PER_LED:
            return True

        mode = _per_led_mode(device.modes)
        if mode is None:
            if controller_id not in self._no_per_led:
                self._no_per_led.add(controller_id)
                logger.warning(f"Controller {device.name} has no per-LED mode, leaving it unchanged")
            return False

        logger.info(f"Switching {device.name} to mode {mode.name!r}")
        try:
            device.set_mode(mode)
        except (OSError, ValueError) as e:
            raise LedUpdateError(controller_id, original_error=f"mode switch failed: {e}") from e
        return True

    def close(self) -> None:
        try:
            self._client.disconnect()
        except OSError as e:
            logger.debug(f"Error closing OpenRGB connection: {e}")
