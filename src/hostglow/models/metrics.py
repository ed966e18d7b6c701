"""Per-tick metric values."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import MetricSource


class MetricSnapshot(BaseModel):
    """Host utilization produced by one sampling tick.

    Both values are fractions in [0.0, 1.0]. ``cpu`` is the sliding-window
    average, ``memory`` is a point sample with no history.
    """

    model_config = ConfigDict(frozen=True)

    cpu: float = Field(ge=0.0, le=1.0, description="Smoothed CPU non-idle fraction")
    memory: float = Field(ge=0.0, le=1.0, description="Memory used/total fraction")

    def value_for(self, metric: MetricSource) -> float:
        """Return the value a recipe with the given metric source should use."""
        if metric == MetricSource.CPU:
            return self.cpu
        return self.memory
