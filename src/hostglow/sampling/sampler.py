"""Metric sampler: smoothed CPU plus instantaneous memory per tick."""

import logging
import time
from collections.abc import Callable
from typing import Optional

from hostglow.exceptions import SensorError
from hostglow.models import MetricSnapshot

from .providers import (
    CpuMetricsProvider,
    MemoryMetricsProvider,
    PsutilCpuProvider,
    PsutilMemoryProvider,
)
from .window import SlidingWindow

logger = logging.getLogger(__name__)


class MetricSampler:
    """
    Produces one MetricSnapshot per call to :meth:`sample`.

    Each sample blocks for ``sample_interval`` seconds between two CPU
    snapshots; that wait is both the measurement window and the only
    pause in a monitor tick. The CPU fraction is pushed into the sliding
    window and the window average is reported. Memory is read once per
    tick with no history.

    If any measurement fails the tick is abandoned before the window is
    touched, and the SensorError propagates.
    """

    def __init__(
        self,
        window: SlidingWindow,
        sample_interval: float,
        cpu_provider: Optional[CpuMetricsProvider] = None,
        memory_provider: Optional[MemoryMetricsProvider] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the sampler.

        Args:
            window: Window that holds recent CPU fractions
            sample_interval: CPU measurement window in seconds
            cpu_provider: CPU accounting (defaults to psutil)
            memory_provider: Memory accounting (defaults to psutil)
            sleep: Blocking wait used for the measurement window
        """
        self.window = window
        self.sample_interval = sample_interval
        self._cpu = cpu_provider or PsutilCpuProvider()
        self._memory = memory_provider or PsutilMemoryProvider()
        self._sleep = sleep

    def measure_cpu(self) -> float:
        """Measure the non-idle CPU fraction over one sample interval."""
        start = self._cpu.instant()
        self._sleep(self.sample_interval)
        end = self._cpu.instant()
        return self._cpu.delta(start, end)

    def measure_memory(self) -> float:
        """Read the current used/total memory fraction."""
        self._memory.refresh()
        total = self._memory.total_bytes()
        if total <= 0:
            raise SensorError("memory", original_error=f"total memory reported as {total}")
        return min(1.0, max(0.0, self._memory.used_bytes() / total))

    def sample(self) -> MetricSnapshot:
        """Run one sampling tick."""
        cpu_usage = self.measure_cpu()
        memory_usage = self.measure_memory()

        self.window.push(cpu_usage)
        snapshot = MetricSnapshot(cpu=self.window.average(), memory=memory_usage)

        logger.debug(
            f"cpu={cpu_usage:.3f} (avg {snapshot.cpu:.3f} over {len(self.window)}) "
            f"memory={snapshot.memory:.3f}"
        )
        return snapshot
