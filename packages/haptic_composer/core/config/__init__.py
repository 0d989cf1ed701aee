"""Configuration management for Haptic Composer."""

from haptic_composer.core.config.loader import (
    configure_logging,
    detect_format,
    load_config,
    load_haptic_config,
)
from haptic_composer.core.config.models import (
    ChannelConfig,
    ConfigBase,
    HapticConfig,
    LoggingConfig,
    Platform,
    PlayerConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_haptic_config",
    "detect_format",
    "configure_logging",
    # Models
    "ConfigBase",
    "HapticConfig",
    "PlayerConfig",
    "ChannelConfig",
    "LoggingConfig",
    "Platform",
]
