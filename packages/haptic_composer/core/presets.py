"""Ready-made haptic patterns for common interactions.

Presets are plain immutable HapticPattern values and can be played
directly or used as a starting point via ``copy_with``.
"""

from __future__ import annotations

from haptic_composer.core.models.builder import PatternBuilder
from haptic_composer.core.models.effects import (
    INTENSITY_LIGHT,
    INTENSITY_MEDIUM,
    INTENSITY_STRONG,
)
from haptic_composer.core.models.pattern import HapticPattern

# ============================================================================
# Feedback
# ============================================================================

SUCCESS = PatternBuilder().pulse(0.6, 30).silence(80).pulse(0.8, 40).build()

ERROR = (
    PatternBuilder()
    .pulse(0.9, 20)
    .silence(50)
    .pulse(0.9, 20)
    .silence(50)
    .pulse(0.9, 20)
    .build()
)

WARNING = PatternBuilder().pulse(0.9, 60).build()

NOTIFICATION = (
    PatternBuilder()
    .pulse(0.3, 40)
    .silence(60)
    .pulse(0.6, 40)
    .silence(60)
    .pulse(0.9, 40)
    .build()
)

# ============================================================================
# Interaction
# ============================================================================

BUTTON_PRESS = PatternBuilder().pulse(0.7, 40, sharpness=0.9).build()

TOGGLE = PatternBuilder().pulse(0.5, 25).silence(40).pulse(0.5, 25).build()

# Sustained build-up signalling the press was recognised
LONG_PRESS = (
    PatternBuilder()
    .pulse(0.2, 150)
    .pulse(0.5, 150)
    .pulse(0.8, 150)
    .pulse(1.0, 100)
    .build()
)

LONG_TAP = (
    PatternBuilder()
    .pulse(0.7, 70, sharpness=0.8)
    .silence(60)
    .pulse(0.5, 50, sharpness=0.7)
    .build()
)

SWIPE = PatternBuilder().pulse(0.5, 150).build()

SELECTION = PatternBuilder().pulse(0.8, 35).silence(50).pulse(0.5, 35).build()

# ============================================================================
# Expressive
# ============================================================================

HEARTBEAT = (
    PatternBuilder()
    .pulse(0.8, 60, sharpness=0.7)
    .silence(40)
    .pulse(0.6, 50, sharpness=0.6)
    .silence(900)
    .build()
)

BREATHE = (
    PatternBuilder()
    .pulse(0.2, 100)
    .pulse(0.5, 150)
    .pulse(0.8, 100)
    .pulse(0.5, 150)
    .pulse(0.2, 100)
    .build()
)

DRUMROLL = (
    PatternBuilder()
    .pulse(0.4, 10)
    .silence(10)
    .pulse(0.4, 10)
    .silence(10)
    .pulse(0.5, 12)
    .silence(10)
    .pulse(0.5, 12)
    .silence(8)
    .pulse(0.6, 15)
    .silence(8)
    .pulse(0.7, 15)
    .silence(6)
    .pulse(0.8, 18)
    .silence(6)
    .pulse(0.9, 20)
    .build()
)

RIPPLE = (
    PatternBuilder()
    .pulse(0.9, 50, sharpness=0.8)
    .silence(120)
    .pulse(0.6, 40, sharpness=0.7)
    .silence(150)
    .pulse(0.3, 30, sharpness=0.6)
    .silence(200)
    .pulse(0.15, 20, sharpness=0.5)
    .build()
)

ATTENTION = (
    PatternBuilder()
    .pulse(1.0, 80, sharpness=0.9)
    .silence(200)
    .pulse(0.5, 40, sharpness=0.7)
    .silence(150)
    .pulse(0.5, 40, sharpness=0.7)
    .build()
)

BOUNCE = (
    PatternBuilder()
    .pulse(0.9, 40, sharpness=0.8)
    .silence(40)
    .pulse(0.6, 35, sharpness=0.7)
    .silence(50)
    .pulse(0.4, 30, sharpness=0.6)
    .silence(70)
    .pulse(0.2, 25, sharpness=0.5)
    .build()
)

# ============================================================================
# Utility
# ============================================================================

TAP = PatternBuilder().pulse(0.6, 30, sharpness=0.8).build()
LIGHT = PatternBuilder().pulse(INTENSITY_LIGHT, 25).build()
MEDIUM = PatternBuilder().pulse(INTENSITY_MEDIUM, 60, sharpness=0.7).build()
STRONG = PatternBuilder().pulse(INTENSITY_STRONG, 80, sharpness=0.9).build()
DOUBLE_TAP = (
    PatternBuilder().pulse(0.5, 20, sharpness=0.7).silence(40).pulse(0.5, 20, sharpness=0.7).build()
)
DELETE = (
    PatternBuilder()
    .pulse(0.8, 40)
    .silence(40)
    .pulse(0.6, 30)
    .silence(40)
    .pulse(0.4, 20)
    .build()
)
POSITIVE = PatternBuilder().pulse(0.7, 25).silence(35).pulse(0.8, 35).build()
NEGATIVE = PatternBuilder().pulse(0.7, 20).silence(30).pulse(0.7, 20).build()
# Minimal pause; plays nothing
SILENT = PatternBuilder().silence(1).build()


PRESETS: dict[str, HapticPattern] = {
    "success": SUCCESS,
    "error": ERROR,
    "warning": WARNING,
    "notification": NOTIFICATION,
    "button_press": BUTTON_PRESS,
    "toggle": TOGGLE,
    "long_press": LONG_PRESS,
    "long_tap": LONG_TAP,
    "swipe": SWIPE,
    "selection": SELECTION,
    "heartbeat": HEARTBEAT,
    "breathe": BREATHE,
    "drumroll": DRUMROLL,
    "ripple": RIPPLE,
    "attention": ATTENTION,
    "bounce": BOUNCE,
    "tap": TAP,
    "light": LIGHT,
    "medium": MEDIUM,
    "strong": STRONG,
    "double_tap": DOUBLE_TAP,
    "delete": DELETE,
    "positive": POSITIVE,
    "negative": NEGATIVE,
    "silent": SILENT,
}


def get_preset(name: str) -> HapticPattern:
    """Look up a preset by name.

    Raises:
        KeyError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown haptic preset: {name!r}. Available: {list_presets()}") from None


def list_presets() -> list[str]:
    return sorted(PRESETS)
