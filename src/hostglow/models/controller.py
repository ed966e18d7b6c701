"""Controller information reported by the lighting service."""

from pydantic import BaseModel, ConfigDict, Field


class ControllerInfo(BaseModel):
    """Name and LED count of one RGB controller."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Device name as reported by OpenRGB")
    led_count: int = Field(ge=0, description="Number of addressable LEDs")
