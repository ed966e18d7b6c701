"""Device recipe models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .color import Color
from .enums import Layout, MetricSource


class Segment(BaseModel):
    """A run of LEDs rendered with one layout.

    ``size=None`` makes the segment a fill segment: it takes every LED the
    fixed-size segments of the recipe leave over.
    """

    model_config = ConfigDict(frozen=True)

    layout: Layout
    size: Optional[int] = Field(default=None, ge=0, description="LED count, None = fill")
    repeat: int = Field(default=1, ge=1, description="How many times the segment repeats")

    @property
    def is_fill(self) -> bool:
        return self.size is None


class DeviceRecipe(BaseModel):
    """How one device is lit.

    A recipe without segments is the excluded policy: the device is
    recognized but its LEDs are left alone.
    """

    model_config = ConfigDict(frozen=True)

    metric: Optional[MetricSource] = None
    start_color: Color = Field(default_factory=Color.off)
    end_color: Color = Field(default_factory=Color.off)
    segments: tuple[Segment, ...] = ()

    @model_validator(mode="after")
    def check_segments(self) -> "DeviceRecipe":
        """Validate the segment plan."""
        if self.segments and self.metric is None:
            raise ValueError("a recipe with segments needs a metric source")
        fills = [s for s in self.segments if s.is_fill]
        if len(fills) > 1:
            raise ValueError("a recipe can have at most one fill segment")
        if fills and fills[0].repeat != 1:
            raise ValueError("a fill segment cannot repeat")
        return self

    @classmethod
    def excluded(cls) -> "DeviceRecipe":
        """Create the do-nothing recipe."""
        return cls()

    @classmethod
    def single(
        cls,
        metric: MetricSource,
        layout: Layout,
        start_color: Color,
        end_color: Color,
    ) -> "DeviceRecipe":
        """Create a recipe that renders one layout over all LEDs."""
        return cls(
            metric=metric,
            start_color=start_color,
            end_color=end_color,
            segments=(Segment(layout=layout),),
        )

    @property
    def is_excluded(self) -> bool:
        return not self.segments

    @property
    def fixed_led_count(self) -> int:
        """LEDs claimed by the fixed-size segments."""
        return sum(s.size * s.repeat for s in self.segments if not s.is_fill)

    def plan(self, led_count: int) -> Optional[list[tuple[Layout, int]]]:
        """
        Resolve the segments against a device's LED count.

        Args:
            led_count: LEDs reported by the device

        Returns:
            Ordered (layout, size) runs summing to ``led_count``, or None
            if the segments cannot cover exactly that many LEDs.
        """
        remainder = led_count - self.fixed_led_count
        has_fill = any(s.is_fill for s in self.segments)

        if remainder < 0 or (remainder > 0 and not has_fill):
            return None

        runs = []
        for segment in self.segments:
            if segment.is_fill:
                runs.append((segment.layout, remainder))
            else:
                runs.extend([(segment.layout, segment.size)] * segment.repeat)
        return runs
