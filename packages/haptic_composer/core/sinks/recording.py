"""In-memory sink that records every pulse.

Used for simulation (inspect what a pattern would do on a device) and as
the test double for the player.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import logging

from haptic_composer.core.errors import SinkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriggerCall:
    """One recorded trigger.

    Attributes:
        intensity: Intensity passed to the sink
        duration_ms: Duration passed to the sink
        sharpness: Sharpness passed to the sink
        at: Event-loop time (seconds) when the call started
    """

    intensity: float
    duration_ms: int
    sharpness: float
    at: float


@dataclass
class RecordingSink:
    """Sink that stores calls instead of vibrating.

    Attributes:
        supported: Value reported by initialize/is_supported
        max_duration_ms: Per-pulse ceiling reported to the player
        latency_ms: Simulated time each trigger takes
        fail_calls: Zero-based trigger indices that raise SinkError
    """

    supported: bool = True
    max_duration_ms: int = 5000
    latency_ms: float = 0.0
    fail_calls: set[int] = field(default_factory=set)
    calls: list[TriggerCall] = field(default_factory=list)
    attempts: int = 0
    initialize_count: int = 0
    released: bool = False

    async def initialize(self) -> bool:
        self.initialize_count += 1
        return self.supported

    async def trigger(self, intensity: float, duration_ms: int, sharpness: float) -> None:
        index = self.attempts
        self.attempts += 1
        started = asyncio.get_running_loop().time()

        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000.0)

        if index in self.fail_calls:
            raise SinkError("Simulated trigger failure", method="trigger", code="SIMULATED")

        self.calls.append(TriggerCall(intensity, duration_ms, sharpness, started))
        logger.debug(f"Recorded pulse #{index}: intensity={intensity}, duration={duration_ms}ms")

    async def is_supported(self) -> bool:
        return self.supported and not self.released

    async def release(self) -> None:
        self.released = True

    @property
    def last_call(self) -> TriggerCall | None:
        return self.calls[-1] if self.calls else None

    def clear(self) -> None:
        """Forget recorded calls and attempt counters."""
        self.calls.clear()
        self.attempts = 0
