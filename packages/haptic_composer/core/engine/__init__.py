"""Playback engine for haptic patterns.

Core concepts:
- HapticPlayer: Plays patterns on a sink, one session at a time
- PlaybackSession: Cancellable walk over one pattern's events
- PlaybackResult: How a play() call ended
- HapticContext: Player plus configuration, usable as an async context manager

Example:
    >>> from haptic_composer.core.engine import HapticPlayer
    >>> from haptic_composer.core.sinks import RecordingSink
    >>> from haptic_composer.core import presets
    >>>
    >>> player = HapticPlayer(RecordingSink())
    >>> result = await player.play(presets.HEARTBEAT)
"""

from haptic_composer.core.engine.context import HapticContext
from haptic_composer.core.engine.models import PlaybackOutcome, PlaybackResult, PlaybackState
from haptic_composer.core.engine.player import CompletionCallback, ErrorCallback, HapticPlayer
from haptic_composer.core.engine.session import PlaybackSession

__all__ = [
    "HapticPlayer",
    "HapticContext",
    "PlaybackSession",
    "PlaybackState",
    "PlaybackOutcome",
    "PlaybackResult",
    "CompletionCallback",
    "ErrorCallback",
]
