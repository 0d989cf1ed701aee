"""Haptic context: one player plus its configuration and usage metrics.

Convenience wrapper for applications: builds a player from a HapticConfig,
initializes it on entry and disposes it on exit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from haptic_composer.core.config.models import HapticConfig
from haptic_composer.core.engine.models import PlaybackResult
from haptic_composer.core.engine.player import HapticPlayer
from haptic_composer.core.models.pattern import HapticPattern
from haptic_composer.core.presets import get_preset
from haptic_composer.core.sinks.channel import ChannelSink, MethodChannel
from haptic_composer.core.sinks.protocols import HapticSink


@dataclass
class HapticContext:
    """Shared player and configuration.

    Attributes:
        player: Player driving the sink
        config: Configuration the player was built from
        metrics: Mutable counters (plays, outcomes, triggers)

    Example:
        >>> async with HapticContext.create(RecordingSink()) as ctx:
        ...     await ctx.play_preset("success")
        >>> ctx.metrics["plays"]
        1
    """

    player: HapticPlayer
    config: HapticConfig = field(default_factory=HapticConfig)
    metrics: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        sink: HapticSink,
        config: HapticConfig | None = None,
        *,
        name: str = "default",
    ) -> HapticContext:
        """Build a context around an existing sink."""
        config = config or HapticConfig()
        return cls(player=HapticPlayer(sink, config.player, name=name), config=config)

    @classmethod
    def from_channel(
        cls,
        channel: MethodChannel,
        config: HapticConfig | None = None,
        *,
        name: str = "default",
    ) -> HapticContext:
        """Build a context whose sink talks to a native method channel."""
        config = config or HapticConfig()
        return cls.create(ChannelSink(channel, config.channel), config, name=name)

    async def __aenter__(self) -> HapticContext:
        await self.player.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.player.dispose()

    async def play(self, pattern: HapticPattern, **kwargs: Any) -> PlaybackResult:
        """Play a pattern and record the outcome in metrics.

        Keyword arguments are forwarded to HapticPlayer.play().
        """
        result = await self.player.play(pattern, **kwargs)
        self.increment_metric("plays")
        self.increment_metric(f"outcome.{result.outcome.value}")
        self.increment_metric("triggers", result.triggers)
        self.increment_metric("failed_triggers", result.failed_triggers)
        return result

    async def play_preset(self, name: str, **kwargs: Any) -> PlaybackResult:
        """Play a named preset.

        Raises:
            KeyError: If no preset has that name
        """
        return await self.play(get_preset(name), **kwargs)

    def increment_metric(self, key: str, delta: int | float = 1) -> None:
        """Increment numeric metric.

        Args:
            key: Metric key
            delta: Amount to increment (default: 1)
        """
        self.metrics[key] = self.metrics.get(key, 0) + delta
