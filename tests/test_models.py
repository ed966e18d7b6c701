"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from hostglow.models import (
    AppConfig,
    Color,
    ControllerInfo,
    DeviceRecipe,
    Layout,
    MetricSnapshot,
    MetricSource,
    Segment,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_frozen_and_hashable(self):
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 5
        assert len({color, Color(r=1, g=2, b=3)}) == 1

    @pytest.mark.unit
    def test_preset_color_off(self):
        assert Color.off() == Color(r=0, g=0, b=0)

    @pytest.mark.unit
    def test_to_rgb_tuple(self):
        assert Color(r=10, g=20, b=30).to_rgb_tuple() == (10, 20, 30)

    @pytest.mark.unit
    def test_to_hex(self):
        assert Color(r=127, g=0, b=0).to_hex() == "#7F0000"


class TestMetricSnapshot:
    """Test MetricSnapshot model."""

    @pytest.mark.unit
    def test_value_for(self):
        snapshot = MetricSnapshot(cpu=0.25, memory=0.5)
        assert snapshot.value_for(MetricSource.CPU) == 0.25
        assert snapshot.value_for(MetricSource.MEMORY) == 0.5

    @pytest.mark.unit
    def test_fractions_are_bounded(self):
        with pytest.raises(ValidationError):
            MetricSnapshot(cpu=1.5, memory=0.5)


class TestControllerInfo:
    """Test ControllerInfo model."""

    @pytest.mark.unit
    def test_negative_led_count_rejected(self):
        with pytest.raises(ValidationError):
            ControllerInfo(name="strip", led_count=-1)


class TestDeviceRecipe:
    """Test recipe validation and segment planning."""

    @pytest.fixture
    def composite(self, white, red):
        return DeviceRecipe(
            metric=MetricSource.CPU,
            start_color=white,
            end_color=red,
            segments=(
                Segment(layout=Layout.GRADIENT, size=24),
                Segment(layout=Layout.BLOCK, size=5, repeat=6),
            ),
        )

    @pytest.mark.unit
    def test_excluded(self):
        recipe = DeviceRecipe.excluded()
        assert recipe.is_excluded
        assert recipe.metric is None

    @pytest.mark.unit
    def test_single_plan_covers_all_leds(self, white, red):
        recipe = DeviceRecipe.single(MetricSource.MEMORY, Layout.GRADIENT, white, red)
        assert recipe.plan(10) == [(Layout.GRADIENT, 10)]

    @pytest.mark.unit
    def test_composite_plan(self, composite):
        runs = composite.plan(54)
        assert runs[0] == (Layout.GRADIENT, 24)
        assert runs[1:] == [(Layout.BLOCK, 5)] * 6
        assert composite.fixed_led_count == 54

    @pytest.mark.unit
    def test_composite_plan_mismatch(self, composite):
        assert composite.plan(53) is None
        assert composite.plan(60) is None

    @pytest.mark.unit
    def test_fill_takes_remainder(self, white, red):
        recipe = DeviceRecipe(
            metric=MetricSource.CPU,
            start_color=white,
            end_color=red,
            segments=(
                Segment(layout=Layout.BLOCK, size=2),
                Segment(layout=Layout.GRADIENT),
            ),
        )
        assert recipe.plan(10) == [(Layout.BLOCK, 2), (Layout.GRADIENT, 8)]
        assert recipe.plan(1) is None

    @pytest.mark.unit
    def test_segments_need_metric(self):
        with pytest.raises(ValidationError):
            DeviceRecipe(segments=(Segment(layout=Layout.BLOCK),))

    @pytest.mark.unit
    def test_single_fill_segment_only(self):
        with pytest.raises(ValidationError):
            DeviceRecipe(
                metric=MetricSource.CPU,
                segments=(Segment(layout=Layout.BLOCK), Segment(layout=Layout.GRADIENT)),
            )

    @pytest.mark.unit
    def test_fill_cannot_repeat(self):
        with pytest.raises(ValidationError):
            DeviceRecipe(
                metric=MetricSource.CPU,
                segments=(Segment(layout=Layout.BLOCK, repeat=2),),
            )


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 6742
        assert config.sample_interval == 0.5
        assert config.sample_time == 5.0
        assert config.connect_retry_interval == 5.0

    @pytest.mark.unit
    def test_window_size(self):
        assert AppConfig().window_size == 10
        assert AppConfig(sample_time=3.0, sample_interval=1.0).window_size == 3

    @pytest.mark.unit
    def test_durations_must_be_positive(self):
        with pytest.raises(ValidationError):
            AppConfig(sample_interval=0)
        with pytest.raises(ValidationError):
            AppConfig(connect_retry_interval=-1)

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(host="10.0.0.5", port=6800).save(path)

        loaded = AppConfig.load_or_default(path)
        assert loaded.host == "10.0.0.5"
        assert loaded.port == 6800

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "missing.json")
        assert config == AppConfig()
        assert not (temp_dir / "missing.json").exists()
