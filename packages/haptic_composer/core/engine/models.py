"""Playback state and result types."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PlaybackState(str, Enum):
    """Lifecycle of a playback session.

    idle -> delaying -> playing_event -> waiting_out -> (next event | next
    repeat | completed); any state may move to cancelled or errored.
    """

    IDLE = "idle"
    DELAYING = "delaying"
    PLAYING_EVENT = "playing_event"
    WAITING_OUT = "waiting_out"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ERRORED = "errored"

    @property
    def is_terminal(self) -> bool:
        return self in (PlaybackState.COMPLETED, PlaybackState.CANCELLED, PlaybackState.ERRORED)


class PlaybackOutcome(str, Enum):
    """How a play() call ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


class PlaybackResult(BaseModel):
    """Result of one play() call.

    Never raised - errors are captured in ``error`` and also delivered to
    the on_error callback.

    Attributes:
        outcome: How playback ended
        triggers: Successful sink trigger calls
        failed_triggers: Sink trigger calls that raised or timed out
        iterations_completed: Full passes over the pattern
        elapsed_ms: Wall time from session start to end
        error: Timeout or unexpected error (None when completed/cancelled)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    outcome: PlaybackOutcome
    triggers: int = Field(default=0, ge=0)
    failed_triggers: int = Field(default=0, ge=0)
    iterations_completed: int = Field(default=0, ge=0)
    elapsed_ms: float = Field(default=0.0, ge=0.0)
    error: BaseException | None = Field(default=None, repr=False)

    @property
    def completed(self) -> bool:
        return self.outcome is PlaybackOutcome.COMPLETED
