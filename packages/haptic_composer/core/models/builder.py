"""Fluent builder for haptic patterns."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from haptic_composer.core.errors import PatternValidationError
from haptic_composer.core.models.event import HapticEvent, pulse, silence
from haptic_composer.core.models.pattern import INFINITE_REPEAT, HapticPattern


class PatternBuilder:
    """Chainable pattern construction.

    Every step validates its arguments immediately, so an invalid value
    fails at the call that introduced it rather than at ``build()``.

    Example:
        >>> pattern = (
        ...     PatternBuilder()
        ...     .pulse(0.8, 50)
        ...     .silence(100)
        ...     .pulse(0.5, 30)
        ...     .repeat(2)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._events: list[HapticEvent] = []
        self._repeat: int | Literal["infinite"] | None = None
        self._delay_ms: int | None = None

    def pulse(
        self, intensity: float, duration_ms: int, sharpness: float | None = None
    ) -> PatternBuilder:
        """Append a pulse event."""
        self._events.append(pulse(intensity, duration_ms, sharpness))
        return self

    def silence(self, duration_ms: int) -> PatternBuilder:
        """Append a silence event."""
        self._events.append(silence(duration_ms))
        return self

    def add_event(self, event: HapticEvent) -> PatternBuilder:
        self._events.append(event)
        return self

    def add_events(self, events: Iterable[HapticEvent]) -> PatternBuilder:
        """Append several events.

        Raises:
            PatternValidationError: If ``events`` is empty
        """
        events = list(events)
        if not events:
            raise PatternValidationError("Cannot add empty event list")
        self._events.extend(events)
        return self

    def repeat(self, count: int | Literal["infinite"] | None) -> PatternBuilder:
        """Set the pass count ("infinite" loops until stopped, None plays once).

        Raises:
            PatternValidationError: If count is not positive
        """
        if count is not None and count != INFINITE_REPEAT:
            if not isinstance(count, int) or count <= 0:
                raise PatternValidationError(f"Repeat count must be positive, got {count}")
        self._repeat = count
        return self

    def delay(self, delay_ms: int) -> PatternBuilder:
        """Set the initial delay.

        Raises:
            PatternValidationError: If delay is negative
        """
        if delay_ms < 0:
            raise PatternValidationError(f"Delay cannot be negative, got {delay_ms}ms")
        self._delay_ms = delay_ms
        return self

    def clear(self) -> PatternBuilder:
        """Drop all events and settings."""
        self._events.clear()
        self._repeat = None
        self._delay_ms = None
        return self

    @property
    def event_count(self) -> int:
        return len(self._events)

    @property
    def is_empty(self) -> bool:
        return not self._events

    def build(self) -> HapticPattern:
        """Build the pattern.

        Raises:
            PatternValidationError: If no events have been added
        """
        if not self._events:
            raise PatternValidationError(
                "Cannot build pattern with no events. Add at least one event."
            )
        return HapticPattern.create(self._events, repeat=self._repeat, delay_ms=self._delay_ms)
