"""Protocols for platform haptic sinks.

A sink is the device capability that actually vibrates. The player only
depends on this protocol; how the call reaches the hardware (method
channel, serial link, simulator) is up to the implementation.
"""

from typing import Protocol


class HapticSink(Protocol):
    """
    Protocol for platform vibration backends (async-first).

    All implementations must support:
    - Idempotent initialize/release
    - Best-effort trigger (may raise; the player tolerates failure)
    - A per-pulse duration ceiling via max_duration_ms
    """

    @property
    def max_duration_ms(self) -> int:
        """Longest single pulse the device accepts, in milliseconds."""
        ...

    async def initialize(self) -> bool:
        """
        Prepare the device for playback.

        Returns:
            True if the device can vibrate
        """
        ...

    async def trigger(self, intensity: float, duration_ms: int, sharpness: float) -> None:
        """
        Fire a single pulse.

        Args:
            intensity: Strength in [0.0, 1.0]
            duration_ms: Length in [1, max_duration_ms]
            sharpness: Crispness hint in [0.0, 1.0] (may be ignored)

        Raises:
            SinkError: If the platform call fails
        """
        ...

    async def is_supported(self) -> bool:
        """Check if the device supports haptic feedback."""
        ...

    async def release(self) -> None:
        """Release device resources. The sink is unusable afterwards."""
        ...
