"""Exception hierarchy for haptic playback.

Every error raised by the library derives from HapticError and from the
closest builtin, so callers can catch either form.
"""

from __future__ import annotations


class HapticError(Exception):
    """Base exception for all haptic composer errors."""


class PatternValidationError(HapticError, ValueError):
    """An event or pattern was constructed with invalid static fields."""


class PatternFormatError(HapticError, ValueError):
    """A serialized pattern record is missing fields or malformed."""


class SinkError(HapticError):
    """A single call into the platform sink failed.

    Attributes:
        method: Sink or channel method that failed
        code: Platform error code (if the platform reported one)
        attempts: Number of attempts made before giving up
        cause: Original exception
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        code: str | None = None,
        attempts: int = 1,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.method = method
        self.code = code
        self.attempts = attempts
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error for logging and display."""
        parts = [self.message, f"method={self.method}"]
        if self.code is not None:
            parts.append(f"code={self.code}")
        if self.attempts > 1:
            parts.append(f"attempts={self.attempts}")
        return " | ".join(parts)


class PlaybackTimeoutError(HapticError, TimeoutError):
    """Playback did not finish within the configured ceiling."""

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Pattern playback exceeded {timeout_ms}ms")


class PlayerStateError(HapticError, RuntimeError):
    """Operation is not allowed in the player's current state (e.g. disposed)."""
