"""Enumerations shared by haptic models."""

from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Kind of a single playback step."""

    PULSE = "pulse"
    SILENCE = "silence"


# Event type names used by the legacy mobile record format
LEGACY_EVENT_KINDS: dict[str, EventKind] = {
    "impact": EventKind.PULSE,
    "continuous": EventKind.PULSE,
    "pause": EventKind.SILENCE,
}
