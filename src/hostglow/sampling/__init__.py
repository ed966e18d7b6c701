"""Host metric sampling and smoothing."""

from .providers import (
    CpuMetricsProvider,
    MemoryMetricsProvider,
    PsutilCpuProvider,
    PsutilMemoryProvider,
)
from .sampler import MetricSampler
from .window import SlidingWindow, window_capacity

__all__ = [
    "CpuMetricsProvider",
    "MemoryMetricsProvider",
    "MetricSampler",
    "PsutilCpuProvider",
    "PsutilMemoryProvider",
    "SlidingWindow",
    "window_capacity",
]
