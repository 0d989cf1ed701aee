"""Playback session: walks one pattern against a sink.

A session is the transient state of one in-flight playback. It is created
and exclusively owned by a HapticPlayer, runs as a single asyncio task and
is discarded once it reaches a terminal state.
"""

from __future__ import annotations

import asyncio
import logging

from haptic_composer.core.config.models import PlayerConfig
from haptic_composer.core.engine.models import PlaybackState
from haptic_composer.core.models.event import HapticEvent, PulseEvent
from haptic_composer.core.models.pattern import HapticPattern
from haptic_composer.core.sinks.protocols import HapticSink
from haptic_composer.core.utils.math import clamp

module_logger = logging.getLogger(__name__)


class PlaybackSession:
    """Cooperative, cancellable walk over a pattern's events.

    Cancellation is polled: every wait is sliced into chunks of at most
    ``config.poll_interval_ms`` and the cancel flags are checked between
    chunks and before each event. Once cancellation is observed no further
    sink calls are made.

    Sink failures are logged and counted, never raised: the event's
    duration is still waited out and playback moves to the next event.
    """

    def __init__(
        self,
        pattern: HapticPattern,
        sink: HapticSink,
        config: PlayerConfig,
        cancel_token: asyncio.Event | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        """Initialize session.

        Args:
            pattern: Pattern to play
            sink: Device sink receiving pulses
            config: Timing configuration
            cancel_token: Optional caller-owned cancellation flag
            logger: Logger (defaults to the module logger)
        """
        self.pattern = pattern
        self._sink = sink
        self._config = config
        self._cancel = asyncio.Event()
        self._external_cancel = cancel_token
        self._logger = logger or module_logger

        self.state = PlaybackState.IDLE
        self.event_index = 0
        self.iteration = 0
        self.triggers = 0
        self.failed_triggers = 0
        self._started_at: float | None = None
        self._finished_at: float | None = None

    @property
    def is_cancelled(self) -> bool:
        if self._cancel.is_set():
            return True
        return self._external_cancel is not None and self._external_cancel.is_set()

    @property
    def elapsed_ms(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._finished_at
        if end is None:
            end = asyncio.get_running_loop().time()
        return (end - self._started_at) * 1000.0

    def cancel(self) -> None:
        """Request cancellation; observed at the next poll."""
        self._cancel.set()

    async def run(self) -> PlaybackState:
        """Play the pattern to a terminal state.

        Returns:
            COMPLETED or CANCELLED

        Raises:
            asyncio.CancelledError: If the task itself is cancelled (state -> CANCELLED)
        """
        loop = asyncio.get_running_loop()
        self._started_at = loop.time()
        iterations = self.pattern.iterations

        self._logger.debug(
            f"Playing pattern with {len(self.pattern.events)} events, "
            f"{'infinite' if iterations is None else iterations} repeat(s)"
        )

        try:
            if self.pattern.delay_ms:
                self.state = PlaybackState.DELAYING
                await self._wait(self.pattern.delay_ms)

            while not self.is_cancelled and (iterations is None or self.iteration < iterations):
                await self._play_events()
                if self.is_cancelled:
                    break
                self.iteration += 1

            self.state = PlaybackState.CANCELLED if self.is_cancelled else PlaybackState.COMPLETED
        except asyncio.CancelledError:
            self.state = PlaybackState.CANCELLED
            raise
        except Exception:
            self.state = PlaybackState.ERRORED
            raise
        finally:
            self._finished_at = loop.time()

        self._logger.debug(
            f"Session {self.state.value} after {self.iteration} pass(es), "
            f"{self.triggers} trigger(s), {self.failed_triggers} failure(s)"
        )
        return self.state

    async def _play_events(self) -> None:
        for index, event in enumerate(self.pattern.events):
            if self.is_cancelled:
                return
            self.event_index = index

            if isinstance(event, PulseEvent):
                self.state = PlaybackState.PLAYING_EVENT
                await self._trigger(event, index)

            self.state = PlaybackState.WAITING_OUT
            await self._wait(max(1, event.duration_ms))

    async def _trigger(self, event: HapticEvent, index: int) -> None:
        """Send one pulse to the sink, clamping values into the sink's range."""
        sharpness = self._config.default_sharpness if event.sharpness is None else event.sharpness
        intensity = clamp(event.intensity, 0.0, 1.0)
        duration_ms = int(clamp(event.duration_ms, 1, self._sink.max_duration_ms))
        valid_sharpness = clamp(sharpness, 0.0, 1.0)

        if (intensity, duration_ms, valid_sharpness) != (
            event.intensity,
            event.duration_ms,
            sharpness,
        ):
            self._logger.debug(
                f"Event {index} out of range, clamping: intensity={event.intensity}->{intensity}, "
                f"duration={event.duration_ms}->{duration_ms}, sharpness={sharpness}->{valid_sharpness}"
            )

        timeout_ms = self._config.trigger_timeout_ms
        try:
            call = self._sink.trigger(intensity, duration_ms, valid_sharpness)
            if timeout_ms is None:
                await call
            else:
                await asyncio.wait_for(call, timeout=timeout_ms / 1000.0)
            self.triggers += 1
        except asyncio.TimeoutError:
            self.failed_triggers += 1
            self._logger.warning(f"Sink trigger for event {index} timed out after {timeout_ms}ms")
        except Exception as e:
            self.failed_triggers += 1
            self._logger.warning(f"Error playing event {index}: {e}")

    async def _wait(self, duration_ms: int) -> None:
        """Wait ``duration_ms``, returning early once cancellation is observed."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + duration_ms / 1000.0
        poll_s = self._config.poll_interval_ms / 1000.0

        while not self.is_cancelled:
            remaining = deadline - loop.time()
            if remaining <= 0:
                break
            await asyncio.sleep(min(poll_s, remaining))
