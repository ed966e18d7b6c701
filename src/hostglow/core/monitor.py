"""Host monitor: the sampling and lighting loop."""

import logging
import time
from collections.abc import Callable
from typing import Optional

from hostglow.lighting import Connector, LightingConnection, OpenRGBConnection, connect_with_retry
from hostglow.models import AppConfig, MetricSnapshot
from hostglow.policy import DevicePolicyDispatcher
from hostglow.sampling import MetricSampler, SlidingWindow

logger = logging.getLogger(__name__)


class HostMonitor:
    """
    Single long-lived owner of the loop state.

    The monitor owns the sliding window (through its sampler) and the
    lighting connection. There is one flow of control: a tick samples the
    host, then renders and sends every device in turn, and the next tick
    never starts before the previous one has finished.

    Lifecycle:
        1. __init__() - wire collaborators, nothing is opened
        2. connect() - retry until the lighting service answers
        3. run() - tick forever (or ``max_ticks`` times)
    """

    def __init__(
        self,
        config: AppConfig,
        connector: Optional[Connector] = None,
        sampler: Optional[MetricSampler] = None,
        dispatcher: Optional[DevicePolicyDispatcher] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the monitor.

        Args:
            config: Application configuration
            connector: Opens the lighting connection (defaults to OpenRGB)
            sampler: Metric sampler (defaults to psutil with a configured window)
            dispatcher: Device policy (defaults to the built-in recipe table)
            sleep: Wait used between connection attempts
        """
        self.config = config
        self._connector = connector or self._openrgb_connector
        self.sampler = sampler or MetricSampler(
            SlidingWindow(config.window_size),
            sample_interval=config.sample_interval,
        )
        self.dispatcher = dispatcher or DevicePolicyDispatcher()
        self._sleep = sleep
        self.connection: Optional[LightingConnection] = None

    def _openrgb_connector(self) -> LightingConnection:
        return OpenRGBConnection.connect(
            self.config.host, self.config.port, self.config.client_name
        )

    def connect(self) -> LightingConnection:
        """Connect to the lighting service, retrying at a fixed interval forever."""
        self.connection = connect_with_retry(
            self._connector,
            self.config.connect_retry_interval,
            sleep=self._sleep,
        )
        logger.info(f"Connected to lighting service at {self.config.host}:{self.config.port}")
        return self.connection

    def tick(self) -> MetricSnapshot:
        """
        Run one sample-render-send cycle.

        Devices whose rendered color list is empty are not sent an update.

        Raises:
            SensorError: If host metrics cannot be read
            LightingServiceError: If the lighting service fails mid-tick
        """
        if self.connection is None:
            raise RuntimeError("HostMonitor.tick() called before connect()")

        snapshot = self.sampler.sample()

        for controller_id in range(self.connection.controller_count()):
            controller = self.connection.controller(controller_id)
            colors = self.dispatcher.render(controller.name, controller.led_count, snapshot)
            if not colors:
                continue
            self.connection.update_leds(controller_id, colors)

        return snapshot

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Connect and loop.

        Args:
            max_ticks: Stop after this many ticks (None = run until the process stops)
        """
        logger.info(
            f"Sampling every {self.config.sample_interval:g}s, "
            f"CPU averaged over {self.config.window_size} samples"
        )
        self.connect()

        ticks = 0
        try:
            while max_ticks is None or ticks < max_ticks:
                self.tick()
                ticks += 1
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Close the lighting connection if one is open."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.info("Lighting connection closed")
