"""No-op sink for devices without haptics.

Reports no support and discards every pulse.
"""

DEFAULT_MAX_DURATION_MS = 1000


class NullSink:
    """
    No-op async sink.

    Always reports unsupported, discards all triggers.
    """

    def __init__(self, max_duration_ms: int = DEFAULT_MAX_DURATION_MS) -> None:
        self._max_duration_ms = max_duration_ms

    @property
    def max_duration_ms(self) -> int:
        return self._max_duration_ms

    async def initialize(self) -> bool:
        """Always returns False (async)."""
        return False

    async def trigger(self, intensity: float, duration_ms: int, sharpness: float) -> None:
        """Discard (async)."""
        pass

    async def is_supported(self) -> bool:
        """Always returns False (async)."""
        return False

    async def release(self) -> None:
        """No-op (async)."""
        pass
