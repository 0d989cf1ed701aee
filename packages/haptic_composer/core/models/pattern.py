"""Haptic pattern model.

A pattern is an ordered, non-empty sequence of events with an optional
repeat count and an optional initial delay. Patterns are immutable value
objects and round-trip through plain dict records for storage/transport.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, model_validator

from haptic_composer.core.errors import PatternFormatError, PatternValidationError
from haptic_composer.core.models.enum import LEGACY_EVENT_KINDS, EventKind
from haptic_composer.core.models.event import HapticEvent, PulseEvent
from haptic_composer.core.utils.formatting import format_validation_error

logger = logging.getLogger(__name__)

INFINITE_REPEAT: Literal["infinite"] = "infinite"

# Recommended ceiling for one pass of a repeating pattern (30 seconds)
MAX_PATTERN_DURATION_MS = 30_000


class HapticPattern(BaseModel):
    """Ordered sequence of haptic events.

    Attributes:
        events: Events in playback order (at least one)
        repeat: Number of passes; None plays once, "infinite" loops until stopped
        delay_ms: Wait before the first pass only

    Example:
        >>> pattern = HapticPattern.create(
        ...     [pulse(0.8, 50), silence(100), pulse(0.5, 30)],
        ...     repeat=2,
        ... )
        >>> pattern.total_duration_ms
        180
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    events: tuple[HapticEvent, ...] = Field(min_length=1)
    repeat: PositiveInt | Literal["infinite"] | None = None
    delay_ms: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _warn_long_pattern(self) -> HapticPattern:
        """Warn when one pass of a repeating pattern exceeds the recommended ceiling."""
        pass_ms = self.total_duration_ms
        if self.repeat is not None and pass_ms > MAX_PATTERN_DURATION_MS:
            logger.warning(
                f"Pattern duration ({pass_ms}ms) exceeds recommended maximum "
                f"({MAX_PATTERN_DURATION_MS}ms) with repeats"
            )

        logger.debug(
            f"Created pattern: events={len(self.events)}, duration={self.total_duration_ms}ms, "
            f"repeat={self.repeat or 1}, delay={self.delay_ms or 0}ms"
        )
        return self

    @classmethod
    def create(
        cls,
        events: Iterable[HapticEvent],
        repeat: int | Literal["infinite"] | None = None,
        delay_ms: int | None = None,
    ) -> HapticPattern:
        """Create a validated pattern.

        Args:
            events: Events in playback order
            repeat: Positive pass count, "infinite", or None (play once)
            delay_ms: Non-negative initial delay

        Returns:
            HapticPattern

        Raises:
            PatternValidationError: On empty events, non-positive repeat or negative delay
        """
        try:
            return cls(events=tuple(events), repeat=repeat, delay_ms=delay_ms)
        except ValidationError as e:
            raise PatternValidationError(f"Invalid pattern: {format_validation_error(e)}") from e

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def total_duration_ms(self) -> int:
        """Sum of event durations for one pass."""
        return sum(event.duration_ms for event in self.events)

    @property
    def is_infinite(self) -> bool:
        return self.repeat == INFINITE_REPEAT

    @property
    def iterations(self) -> int | None:
        """Number of passes to play, or None when unbounded."""
        if self.is_infinite:
            return None
        return self.repeat or 1

    @property
    def playback_duration_ms(self) -> int | None:
        """Delay plus every pass, or None when the pattern repeats forever."""
        iterations = self.iterations
        if iterations is None:
            return None
        return (self.delay_ms or 0) + self.total_duration_ms * iterations

    @property
    def event_count(self) -> int:
        return len(self.events)

    @property
    def pulse_count(self) -> int:
        """Number of pulse events in one pass."""
        return sum(1 for event in self.events if isinstance(event, PulseEvent))

    def copy_with(
        self,
        *,
        events: Iterable[HapticEvent] | None = None,
        repeat: int | Literal["infinite"] | None = None,
        delay_ms: int | None = None,
    ) -> HapticPattern:
        """Return a revalidated copy with the given fields replaced.

        Raises:
            PatternValidationError: If the resulting pattern is invalid
        """
        return HapticPattern.create(
            events=self.events if events is None else events,
            repeat=self.repeat if repeat is None else repeat,
            delay_ms=self.delay_ms if delay_ms is None else delay_ms,
        )

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def to_record(self) -> dict[str, Any]:
        """Convert to a plain JSON-compatible dict.

        Optional fields that are unset are omitted.
        """
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> HapticPattern:
        """Build a pattern from a record produced by ``to_record``.

        Records in the legacy mobile format (``type`` of
        impact/continuous/pause, ``duration`` and ``delay`` keys) are
        accepted as well.

        Raises:
            PatternFormatError: On missing or malformed fields
        """
        if not isinstance(record, Mapping):
            raise PatternFormatError(f"Pattern record must be a mapping, got {type(record).__name__}")

        raw_events = record.get("events")
        if raw_events is None:
            raise PatternFormatError("Missing required field: events")
        if not isinstance(raw_events, (list, tuple)):
            raise PatternFormatError("Field 'events' must be a list")
        if not raw_events:
            raise PatternFormatError("Pattern must contain at least one event")

        normalized: dict[str, Any] = {
            "events": [_normalize_event_record(raw, index) for index, raw in enumerate(raw_events)],
            "repeat": record.get("repeat"),
            "delay_ms": record["delay_ms"] if "delay_ms" in record else record.get("delay"),
        }

        try:
            return cls.model_validate(normalized)
        except ValidationError as e:
            raise PatternFormatError(
                f"Invalid pattern record: {format_validation_error(e)}"
            ) from e

    def __str__(self) -> str:
        text = f"HapticPattern(events: {len(self.events)}, duration: {self.total_duration_ms}ms"
        if self.repeat is not None:
            text += f", repeat: {self.repeat}"
        if self.delay_ms is not None:
            text += f", delay: {self.delay_ms}ms"
        return text + ")"


def _normalize_event_record(raw: Any, index: int) -> dict[str, Any]:
    """Map one event record onto the current field names.

    Raises:
        PatternFormatError: On missing kind/duration/intensity or unknown kind
    """
    if not isinstance(raw, Mapping):
        raise PatternFormatError(f"Event {index}: record must be a mapping")

    kind = raw.get("kind", raw.get("type"))
    if kind is None:
        raise PatternFormatError(f"Event {index}: missing required field: kind")
    if not isinstance(kind, str):
        raise PatternFormatError(f"Event {index}: invalid event kind: {kind!r}")
    kind = LEGACY_EVENT_KINDS.get(kind, kind)
    try:
        kind = EventKind(kind)
    except ValueError as e:
        raise PatternFormatError(f"Event {index}: invalid event kind: {kind!r}") from e

    duration = raw["duration_ms"] if "duration_ms" in raw else raw.get("duration")
    if duration is None:
        raise PatternFormatError(f"Event {index}: missing required field: duration_ms")

    if kind is EventKind.SILENCE:
        return {"kind": kind.value, "duration_ms": duration}

    intensity = raw.get("intensity")
    if intensity is None:
        raise PatternFormatError(f"Event {index}: missing required field: intensity")

    event: dict[str, Any] = {"kind": kind.value, "intensity": intensity, "duration_ms": duration}
    if raw.get("sharpness") is not None:
        event["sharpness"] = raw["sharpness"]
    return event
