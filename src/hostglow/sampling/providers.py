"""Host metric providers backed by psutil."""

from __future__ import annotations

from typing import Any, Optional, Protocol

import psutil

from hostglow.exceptions import SensorError

# cpu_times() fields that count as idle time (iowait only exists on Linux)
_IDLE_FIELDS = ("idle", "iowait")


class CpuMetricsProvider(Protocol):
    """Protocol for CPU time accounting."""

    def instant(self) -> Any:
        """Take an opaque CPU time snapshot."""
        ...

    def delta(self, start: Any, end: Any) -> float:
        """Non-idle fraction of CPU time between two snapshots."""
        ...


class MemoryMetricsProvider(Protocol):
    """Protocol for memory accounting."""

    def refresh(self) -> None:
        ...

    def used_bytes(self) -> int:
        ...

    def total_bytes(self) -> int:
        ...


class PsutilCpuProvider:
    """CPU time snapshots from ``psutil.cpu_times()``."""

    def instant(self):
        try:
            return psutil.cpu_times()
        except (psutil.Error, OSError) as e:
            raise SensorError("cpu", original_error=str(e)) from e

    @staticmethod
    def _idle(times) -> float:
        return sum(getattr(times, field, 0.0) for field in _IDLE_FIELDS)

    @staticmethod
    def _total(times) -> float:
        # guest time is already counted in user time on Linux
        return sum(
            value for field, value in times._asdict().items()
            if field not in ("guest", "guest_nice")
        )

    def delta(self, start, end) -> float:
        """
        Fraction of CPU time spent not idle between two snapshots.

        Returns 0.0 when no time elapsed between the snapshots.
        """
        total = self._total(end) - self._total(start)
        if total <= 0:
            return 0.0
        idle = self._idle(end) - self._idle(start)
        return max(0.0, min(1.0, 1.0 - idle / total))


class PsutilMemoryProvider:
    """Memory usage from ``psutil.virtual_memory()``.

    Used memory is total minus available, which counts reclaimable cache
    as free.
    """

    def __init__(self):
        self._memory: Optional[Any] = None

    def refresh(self) -> None:
        try:
            self._memory = psutil.virtual_memory()
        except (psutil.Error, OSError) as e:
            raise SensorError("memory", original_error=str(e)) from e

    def _current(self):
        if self._memory is None:
            self.refresh()
        return self._memory

    def used_bytes(self) -> int:
        memory = self._current()
        return memory.total - memory.available

    def total_bytes(self) -> int:
        return self._current().total
