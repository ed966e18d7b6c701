"""Tests for the HostMonitor loop."""

import logging
from unittest.mock import Mock

import pytest

from hostglow.core import HostMonitor
from hostglow.exceptions import LedUpdateError, LightingConnectionError, SensorError
from hostglow.models import AppConfig, Color, ControllerInfo, DeviceRecipe, Layout, MetricSnapshot, MetricSource
from hostglow.policy import RED, WHITE, DevicePolicyDispatcher
from conftest import FakeConnection, StaticSampler

GOLDEN_RECIPES = {
    "block": DeviceRecipe.single(MetricSource.CPU, Layout.BLOCK, WHITE, RED),
    "gradient": DeviceRecipe.single(MetricSource.MEMORY, Layout.GRADIENT, WHITE, RED),
}


def make_monitor(connection, sampler, recipes=None, connector=None):
    return HostMonitor(
        AppConfig(connect_retry_interval=2.0),
        connector=connector or (lambda: connection),
        sampler=sampler,
        dispatcher=DevicePolicyDispatcher(recipes),
        sleep=Mock(),
    )


class TestTick:
    """Test one sample-render-send cycle."""

    @pytest.mark.integration
    def test_golden_output(self, snapshot):
        """cpu 0.3 and memory 0.7 over a block device and a gradient device."""
        connection = FakeConnection([
            ControllerInfo(name="block", led_count=8),
            ControllerInfo(name="gradient", led_count=10),
        ])
        monitor = make_monitor(connection, StaticSampler(snapshot), GOLDEN_RECIPES)
        monitor.connect()

        assert monitor.tick() == snapshot

        blend = Color(r=127, g=89, b=89)
        red = Color(r=127, g=0, b=0)
        white = Color(r=127, g=127, b=127)
        assert connection.updates == [
            (0, [blend] * 8),
            (1, [red] * 7 + [white] * 3),
        ]

    @pytest.mark.unit
    def test_skipped_devices_get_no_update(self, snapshot):
        connection = FakeConnection([
            ControllerInfo(name="unknown", led_count=4),
            ControllerInfo(name="block", led_count=0),
            ControllerInfo(name="gradient", led_count=5),
        ])
        monitor = make_monitor(connection, StaticSampler(snapshot), GOLDEN_RECIPES)
        monitor.connect()
        monitor.tick()

        assert [controller_id for controller_id, _ in connection.updates] == [2]
        assert len(connection.updates[0][1]) == 5

    @pytest.mark.unit
    def test_update_lengths_match_led_counts(self):
        connection = FakeConnection([
            ControllerInfo(name="Corsair Commander Core", led_count=54),
            ControllerInfo(name="G502 HERO Gaming Mouse", led_count=3),
        ])
        monitor = make_monitor(connection, StaticSampler(MetricSnapshot(cpu=0.9, memory=0.1)))
        monitor.connect()
        monitor.tick()

        assert [len(colors) for _, colors in connection.updates] == [54, 3]

    @pytest.mark.unit
    def test_tick_before_connect(self, snapshot):
        monitor = make_monitor(FakeConnection([]), StaticSampler(snapshot))
        with pytest.raises(RuntimeError):
            monitor.tick()

    @pytest.mark.unit
    def test_sensor_error_propagates_before_updates(self):
        connection = FakeConnection([ControllerInfo(name="block", led_count=8)])
        sampler = Mock()
        sampler.sample.side_effect = SensorError("cpu", "denied")
        monitor = make_monitor(connection, sampler, GOLDEN_RECIPES)
        monitor.connect()

        with pytest.raises(SensorError):
            monitor.tick()
        assert connection.updates == []

    @pytest.mark.unit
    def test_update_error_propagates(self, snapshot):
        connection = FakeConnection([ControllerInfo(name="block", led_count=8)])
        connection.update_leds = Mock(side_effect=LedUpdateError(0, "reset"))
        monitor = make_monitor(connection, StaticSampler(snapshot), GOLDEN_RECIPES)
        monitor.connect()

        with pytest.raises(LedUpdateError):
            monitor.tick()


class TestRun:
    """Test connect and loop lifecycle."""

    @pytest.mark.unit
    def test_runs_requested_ticks(self, snapshot):
        connection = FakeConnection([ControllerInfo(name="block", led_count=2)])
        sampler = StaticSampler(snapshot)
        monitor = make_monitor(connection, sampler, GOLDEN_RECIPES)

        monitor.run(max_ticks=3)

        assert sampler.calls == 3
        assert len(connection.updates) == 3
        assert connection.closed
        assert monitor.connection is None

    @pytest.mark.unit
    def test_connect_retries_at_configured_interval(self, snapshot):
        connection = FakeConnection([])
        connector = Mock(side_effect=[
            LightingConnectionError("127.0.0.1", 6742),
            LightingConnectionError("127.0.0.1", 6742),
            connection,
        ])
        monitor = make_monitor(connection, StaticSampler(snapshot), connector=connector)

        assert monitor.connect() is connection
        assert connector.call_count == 3
        assert monitor._sleep.call_count == 2
        monitor._sleep.assert_called_with(2.0)

    @pytest.mark.unit
    def test_fatal_error_closes_connection(self, snapshot):
        connection = FakeConnection([ControllerInfo(name="block", led_count=8)])
        connection.update_leds = Mock(side_effect=LedUpdateError(0, "reset"))
        monitor = make_monitor(connection, StaticSampler(snapshot), GOLDEN_RECIPES)

        with pytest.raises(LedUpdateError):
            monitor.run()
        assert connection.closed

    @pytest.mark.unit
    def test_default_sampler_uses_config_window(self):
        monitor = HostMonitor(AppConfig(sample_time=2.0, sample_interval=0.25), connector=Mock())

        assert monitor.sampler.window.capacity == 8
        assert monitor.sampler.sample_interval == 0.25

    @pytest.mark.unit
    def test_fatal_error_is_left_to_caller(self, snapshot, caplog):
        """The loop propagates failures without logging them itself."""
        connection = FakeConnection([ControllerInfo(name="block", led_count=8)])
        connection.update_leds = Mock(side_effect=LedUpdateError(0, "reset"))
        monitor = make_monitor(connection, StaticSampler(snapshot), GOLDEN_RECIPES)

        with caplog.at_level(logging.DEBUG), pytest.raises(LedUpdateError):
            monitor.run()
        assert [r for r in caplog.records if r.levelno >= logging.ERROR] == []
