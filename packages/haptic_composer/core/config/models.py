"""Configuration models for Haptic Composer."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Host platform of the native vibration bridge."""

    IOS = "ios"
    ANDROID = "android"
    OTHER = "other"


class PlayerConfig(BaseModel):
    """Playback timing configuration.

    Cancellation is cooperative: a running session checks its cancel flag
    every ``poll_interval_ms``, so stop latency is bounded by that value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    poll_interval_ms: int = Field(
        default=50, gt=0, description="Cancellation poll granularity during waits"
    )
    timeout_ms: int | None = Field(
        default=None,
        gt=0,
        description="Default ceiling for a whole play() call (None = no ceiling)",
    )
    trigger_timeout_ms: int | None = Field(
        default=None,
        gt=0,
        description="Ceiling for one sink trigger call, retries included (None = no ceiling)",
    )
    default_sharpness: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Sharpness sent for pulses without one"
    )


class ChannelConfig(BaseModel):
    """Native method-channel configuration (retry policy and platform)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    platform: Platform = Platform.OTHER
    channel_name: str = "com.example.haptic_composer/haptic"
    max_retries: int = Field(default=2, ge=0, description="Retries after the first attempt")
    retry_delay_ms: float = Field(
        default=100.0, ge=0.0, description="Back-off unit; attempt n waits n * retry_delay_ms"
    )
    non_retryable_codes: tuple[str, ...] = Field(
        default=("UNSUPPORTED", "NO_FEATURE"),
        description="Platform error codes that fail immediately",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (None = stdout)")


class ConfigBase(BaseModel):
    """Base class for all Haptic Composer configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to defaults when the file is absent.

        Raises:
            ValueError: If the file content cannot be parsed
            ValidationError: If config is invalid
        """
        from haptic_composer.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        if not Path(path).exists():
            return cls()
        return cls.model_validate(load_config(path))


class HapticConfig(ConfigBase):
    """Top-level configuration: player timing, native channel and logging."""

    player: PlayerConfig = Field(default_factory=PlayerConfig)
    channel: ChannelConfig = Field(default_factory=ChannelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        return Path("haptic_config.json")
