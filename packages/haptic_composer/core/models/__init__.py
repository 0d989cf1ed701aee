"""Haptic value objects: events, patterns and the pattern builder."""

from haptic_composer.core.models.builder import PatternBuilder
from haptic_composer.core.models.enum import EventKind
from haptic_composer.core.models.event import (
    HapticEvent,
    PulseEvent,
    SilenceEvent,
    pulse,
    silence,
)
from haptic_composer.core.models.pattern import (
    INFINITE_REPEAT,
    MAX_PATTERN_DURATION_MS,
    HapticPattern,
)

__all__ = [
    "EventKind",
    "HapticEvent",
    "PulseEvent",
    "SilenceEvent",
    "pulse",
    "silence",
    "HapticPattern",
    "INFINITE_REPEAT",
    "MAX_PATTERN_DURATION_MS",
    "PatternBuilder",
]
