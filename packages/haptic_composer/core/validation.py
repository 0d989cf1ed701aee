"""Best-practice checks for haptic patterns.

Construction already rejects structurally invalid patterns; the checks here
flag patterns that are valid but likely uncomfortable, imperceptible or
expensive to play. ``normalize`` clamps values back into range for events
that were built without validation (e.g. via ``model_construct``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from haptic_composer.core.models.event import HapticEvent, PulseEvent, SilenceEvent
from haptic_composer.core.models.pattern import HapticPattern
from haptic_composer.core.utils.math import clamp


class RecommendedValues:
    """Recommended ranges for comfortable, perceptible haptics."""

    MIN_PERCEPTIBLE_INTENSITY = 0.1
    MAX_COMFORTABLE_INTENSITY = 0.9
    MIN_DURATION_MS = 10
    MAX_SINGLE_EVENT_DURATION_MS = 500
    MAX_PATTERN_DURATION_MS = 5000
    MIN_PAUSE_BETWEEN_EVENTS_MS = 20


# Hard limits used by validate_pattern
MAX_VALID_PATTERN_DURATION_MS = 10_000
MAX_VALID_EVENT_DURATION_MS = 5000
MAX_VALID_REPEAT = 1000
MAX_EVENT_COUNT_WARNING = 20


class ValidationReport(BaseModel):
    """Result of validating a pattern.

    Attributes:
        is_valid: True when there are no errors
        errors: Problems that make the pattern invalid
        warnings: Non-critical issues
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    pattern: HapticPattern

    def summary(self) -> str:
        """Human-readable summary of errors and warnings."""
        if self.is_valid and not self.warnings:
            lines = ["✓ Pattern is valid"]
        elif self.is_valid:
            lines = [f"✓ Pattern is valid (with {len(self.warnings)} warning(s))"]
        else:
            lines = ["✗ Pattern is invalid"]

        if self.errors:
            lines.extend(["", "Errors:"])
            lines.extend(f"  - {error}" for error in self.errors)
        if self.warnings:
            lines.extend(["", "Warnings:"])
            lines.extend(f"  - {warning}" for warning in self.warnings)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.summary()


def validate_pattern(pattern: HapticPattern) -> list[str]:
    """Return validation errors for a pattern (empty list when valid)."""
    errors: list[str] = []

    for index, event in enumerate(pattern.events):
        errors.extend(_validate_event(event, index))

    if pattern.total_duration_ms > MAX_VALID_PATTERN_DURATION_MS:
        errors.append(
            f"Pattern duration exceeds recommended maximum of {MAX_VALID_PATTERN_DURATION_MS}ms"
        )

    if pattern.iterations is not None and pattern.iterations > MAX_VALID_REPEAT:
        errors.append(
            f"Pattern repeat count is very high ({pattern.repeat}), may impact performance"
        )

    return errors


def _validate_event(event: HapticEvent, index: int) -> list[str]:
    errors: list[str] = []
    prefix = f"Event {index}:"

    if event.duration_ms < 1:
        errors.append(f"{prefix} Duration must be positive: {event.duration_ms}ms")
    if event.duration_ms > MAX_VALID_EVENT_DURATION_MS:
        errors.append(f"{prefix} Duration exceeds recommended maximum: {event.duration_ms}ms")

    if isinstance(event, SilenceEvent):
        return errors

    if not 0.0 <= event.intensity <= 1.0:
        errors.append(f"{prefix} Intensity out of range [0.0, 1.0]: {event.intensity}")
    elif event.intensity == 0.0:
        errors.append(f"{prefix} {event.kind} event has zero intensity (will be silent)")

    if event.sharpness is not None and not 0.0 <= event.sharpness <= 1.0:
        errors.append(f"{prefix} Sharpness out of range [0.0, 1.0]: {event.sharpness}")

    return errors


def is_valid(pattern: HapticPattern) -> bool:
    return not validate_pattern(pattern)


def get_report(pattern: HapticPattern) -> ValidationReport:
    """Validate a pattern and collect non-critical warnings."""
    errors = validate_pattern(pattern)
    return ValidationReport(
        is_valid=not errors,
        errors=errors,
        warnings=_get_warnings(pattern),
        pattern=pattern,
    )


def _get_warnings(pattern: HapticPattern) -> list[str]:
    warnings: list[str] = []

    if pattern.event_count > MAX_EVENT_COUNT_WARNING:
        warnings.append(
            f"Pattern contains many events ({pattern.event_count}), consider simplifying"
        )

    if pattern.total_duration_ms > RecommendedValues.MAX_PATTERN_DURATION_MS:
        warnings.append(
            f"Pattern duration is very long ({pattern.total_duration_ms / 1000:.1f}s), "
            "may be overwhelming"
        )

    intensities = [event.intensity for event in pattern.events if isinstance(event, PulseEvent)]
    if len(intensities) > 1 and max(intensities) - min(intensities) < 0.1:
        warnings.append("Pattern has very consistent intensities, could be more dynamic")

    return warnings


def normalize(pattern: HapticPattern) -> HapticPattern:
    """Return a copy with every value clamped into its recommended range.

    Intensity and sharpness are clamped to [0, 1], durations to [1, 5000] ms.
    """
    events: list[HapticEvent] = []
    for event in pattern.events:
        duration_ms = int(clamp(event.duration_ms, 1, MAX_VALID_EVENT_DURATION_MS))
        if isinstance(event, SilenceEvent):
            events.append(SilenceEvent(duration_ms=duration_ms))
            continue
        events.append(
            PulseEvent(
                intensity=clamp(event.intensity, 0.0, 1.0),
                duration_ms=duration_ms,
                sharpness=None if event.sharpness is None else clamp(event.sharpness, 0.0, 1.0),
            )
        )

    return HapticPattern.create(events, repeat=pattern.repeat, delay_ms=pattern.delay_ms)
