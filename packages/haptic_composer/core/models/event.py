"""Haptic event models.

An event is one playback step: a Pulse (vibrate at an intensity for a
duration) or a Silence (timed pause). The two kinds form a closed tagged
union discriminated by ``kind``.
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from haptic_composer.core.errors import PatternValidationError
from haptic_composer.core.models.effects import MAX_EVENT_DURATION_MS, MIN_EVENT_DURATION_MS
from haptic_composer.core.utils.formatting import format_validation_error

logger = logging.getLogger(__name__)


class PulseEvent(BaseModel):
    """Vibrate at ``intensity`` for ``duration_ms``.

    Attributes:
        kind: Discriminator, always "pulse"
        intensity: Vibration strength (0.0 = none, 1.0 = maximum)
        duration_ms: Pulse length in milliseconds
        sharpness: Optional crispness hint (0.0 = dull, 1.0 = crisp);
            sinks without sharpness support ignore it
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["pulse"] = "pulse"
    intensity: float = Field(ge=0.0, le=1.0, description="Vibration strength [0, 1]")
    duration_ms: int = Field(
        ge=MIN_EVENT_DURATION_MS,
        le=MAX_EVENT_DURATION_MS,
        description="Pulse duration in milliseconds",
    )
    sharpness: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Optional sharpness hint [0, 1]"
    )

    def __str__(self) -> str:
        text = f"Pulse(intensity={self.intensity}, duration={self.duration_ms}ms"
        if self.sharpness is not None:
            text += f", sharpness={self.sharpness}"
        return text + ")"


class SilenceEvent(BaseModel):
    """Timed pause with no vibration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["silence"] = "silence"
    duration_ms: int = Field(
        ge=MIN_EVENT_DURATION_MS,
        le=MAX_EVENT_DURATION_MS,
        description="Pause duration in milliseconds",
    )

    @property
    def intensity(self) -> float:
        """Silences never vibrate."""
        return 0.0

    @property
    def sharpness(self) -> None:
        return None

    def __str__(self) -> str:
        return f"Silence(duration={self.duration_ms}ms)"


HapticEvent = Annotated[PulseEvent | SilenceEvent, Field(discriminator="kind")]


def pulse(intensity: float, duration_ms: int, sharpness: float | None = None) -> PulseEvent:
    """Create a pulse event.

    Args:
        intensity: Vibration strength in [0.0, 1.0]
        duration_ms: Duration in milliseconds (1-30000)
        sharpness: Optional sharpness hint in [0.0, 1.0]

    Returns:
        Validated PulseEvent

    Raises:
        PatternValidationError: If any parameter is out of range
    """
    try:
        event = PulseEvent(intensity=intensity, duration_ms=duration_ms, sharpness=sharpness)
    except ValidationError as e:
        raise PatternValidationError(f"Invalid pulse: {format_validation_error(e)}") from e

    logger.debug(f"Created {event}")
    return event


def silence(duration_ms: int) -> SilenceEvent:
    """Create a silence event.

    Raises:
        PatternValidationError: If duration is out of range
    """
    try:
        return SilenceEvent(duration_ms=duration_ms)
    except ValidationError as e:
        raise PatternValidationError(f"Invalid silence: {format_validation_error(e)}") from e
