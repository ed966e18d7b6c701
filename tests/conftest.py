"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from hostglow.models import Color, ControllerInfo, MetricSnapshot


class FakeConnection:
    """In-memory LightingConnection recording every LED update."""

    def __init__(self, controllers):
        self.controllers = list(controllers)
        self.updates: list[tuple[int, list[Color]]] = []
        self.closed = False

    def controller_count(self) -> int:
        return len(self.controllers)

    def controller(self, controller_id: int) -> ControllerInfo:
        return self.controllers[controller_id]

    def update_leds(self, controller_id: int, colors) -> None:
        self.updates.append((controller_id, list(colors)))

    def close(self) -> None:
        self.closed = True


class StaticSampler:
    """Sampler stand-in returning fixed snapshots."""

    def __init__(self, *snapshots: MetricSnapshot):
        self._snapshots = list(snapshots)
        self.calls = 0

    def sample(self) -> MetricSnapshot:
        snapshot = self._snapshots[min(self.calls, len(self._snapshots) - 1)]
        self.calls += 1
        return snapshot


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def white():
    return Color(r=127, g=127, b=127)


@pytest.fixture
def red():
    return Color(r=127, g=0, b=0)


@pytest.fixture
def snapshot():
    """CPU at 30%, memory at 70%."""
    return MetricSnapshot(cpu=0.3, memory=0.7)
