"""Lighting service exceptions.

This module defines exceptions for the OpenRGB server connection:
- LightingServiceError: Base class for lighting service errors
- LightingConnectionError: Server unreachable (retried during start-up)
- LedUpdateError: An LED update failed mid-loop (fatal)
"""

from typing import Optional

from .base import HostGlowError


class LightingServiceError(HostGlowError):
    """Base class for lighting service errors."""
    pass


class LightingConnectionError(LightingServiceError):
    """The OpenRGB server could not be reached."""

    def __init__(self, host: str, port: int, original_error: Optional[str] = None):
        """
        Initialize connection error.

        Args:
            host: Server address that was tried
            port: Server port that was tried
            original_error: Socket error message
        """
        user_msg = f"Cannot connect to OpenRGB server at {host}:{port}"
        technical_msg = user_msg
        if original_error:
            technical_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=technical_msg,
            recoverable=True,
            recovery_hint=(
                "Start OpenRGB with the SDK server enabled (openrgb --server)\n"
                "or point hostglow at it with --host/--port"
            ),
        )
        self.host = host
        self.port = port
        self.original_error = original_error


class LedUpdateError(LightingServiceError):
    """Sending colors to a controller failed."""

    def __init__(self, controller_id: int, original_error: Optional[str] = None):
        """
        Initialize LED update error.

        Args:
            controller_id: Index of the controller being updated
            original_error: Transport or mode-switch error message
        """
        user_msg = f"Failed to update LEDs on controller {controller_id}"
        technical_msg = user_msg
        if original_error:
            technical_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=technical_msg,
            recoverable=False,
            recovery_hint="Check that the OpenRGB server is still running and restart hostglow",
        )
        self.controller_id = controller_id
        self.original_error = original_error
