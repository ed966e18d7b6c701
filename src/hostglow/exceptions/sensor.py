"""Host sensor exceptions.

Raised when CPU or memory accounting cannot be read. These are fatal:
the sampling tick is aborted and the error propagates to the caller.
"""

from typing import Optional

from .base import HostGlowError


class SensorError(HostGlowError):
    """A host metric could not be measured."""

    def __init__(self, sensor: str, original_error: Optional[str] = None):
        """
        Initialize sensor error.

        Args:
            sensor: Which sensor failed ("cpu" or "memory")
            original_error: Error message from the metrics library
        """
        user_msg = f"Failed to read {sensor} utilization"
        technical_msg = user_msg
        if original_error:
            technical_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=technical_msg,
            recoverable=False,
            recovery_hint=(
                "Check that the process can read system statistics "
                "(e.g. /proc on Linux) and restart hostglow"
            ),
        )
        self.sensor = sensor
        self.original_error = original_error
