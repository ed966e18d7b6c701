"""Fixed-capacity sliding window of metric samples."""

import math
from collections import deque
from collections.abc import Iterator


def window_capacity(sample_time: float, sample_interval: float) -> int:
    """
    Number of samples that cover ``sample_time`` seconds.

    Exact halves round up, matching the LED channel rounding.

    Example:
        >>> window_capacity(5.0, 0.5)
        10
    """
    if sample_time <= 0 or sample_interval <= 0:
        raise ValueError("sample_time and sample_interval must be positive")
    return max(1, math.floor(sample_time / sample_interval + 0.5))


class SlidingWindow:
    """
    Ring buffer of the most recent samples.

    Once full, each push evicts the oldest sample. The average is
    recomputed from the current contents on every read.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Window capacity must be at least 1, got {capacity}")
        self._samples: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._samples.maxlen

    @property
    def is_full(self) -> bool:
        return len(self._samples) == self.capacity

    def push(self, sample: float) -> None:
        """Append a sample, evicting the oldest one when full."""
        self._samples.append(sample)

    def average(self) -> float:
        """Arithmetic mean of the current contents (0.0 when empty)."""
        if not self._samples:
            return 0.0
        return sum(self._samples) / len(self._samples)

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"SlidingWindow(capacity={self.capacity}, size={len(self)})"
