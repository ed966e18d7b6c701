"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from hostglow.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".hostglow" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # OpenRGB SDK server
    host: str = Field(default="127.0.0.1", description="OpenRGB server address")
    port: int = Field(default=6742, ge=1, le=65535, description="OpenRGB server port")
    client_name: str = Field(
        default="hostglow", description="Client name announced to the OpenRGB server"
    )
    connect_retry_interval: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait between start-up connection attempts (retried forever)",
    )

    # Sampling
    sample_interval: float = Field(
        default=0.5,
        gt=0,
        description="CPU measurement window per tick (seconds)",
    )
    sample_time: float = Field(
        default=5.0,
        gt=0,
        description="Smoothing horizon for the CPU average (seconds)",
    )

    @property
    def window_size(self) -> int:
        """Number of CPU samples kept in the sliding window."""
        from hostglow.sampling.window import window_capacity

        return window_capacity(self.sample_time, self.sample_interval)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.hostglow/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
