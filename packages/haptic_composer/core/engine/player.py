"""Haptic player: drives patterns through a sink, one session at a time."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import inspect
from typing import Any

from haptic_composer.core.config.models import PlayerConfig
from haptic_composer.core.engine.models import PlaybackOutcome, PlaybackResult, PlaybackState
from haptic_composer.core.engine.session import PlaybackSession
from haptic_composer.core.errors import PlaybackTimeoutError, PlayerStateError
from haptic_composer.core.models.pattern import HapticPattern
from haptic_composer.core.sinks.protocols import HapticSink
from haptic_composer.core.utils.formatting import format_ms
from haptic_composer.core.utils.logging import get_logger

CompletionCallback = Callable[[], Awaitable[None] | None]
ErrorCallback = Callable[[BaseException], Awaitable[None] | None]


class HapticPlayer:
    """Plays haptic patterns on a sink.

    At most one session is active per player. Starting a new pattern
    cancels the active one and waits for it to wind down before the new
    session issues its first trigger (last writer wins).

    play() does not raise for playback problems. Timeouts and unexpected
    errors are reported through ``on_error`` and the returned
    PlaybackResult; only a disposed player raises PlayerStateError.

    Example:
        >>> player = HapticPlayer(RecordingSink(), PlayerConfig(poll_interval_ms=10))
        >>> await player.initialize()
        True
        >>> result = await player.play(presets.DOUBLE_TAP)
        >>> result.outcome
        <PlaybackOutcome.COMPLETED: 'completed'>
    """

    def __init__(
        self,
        sink: HapticSink,
        config: PlayerConfig | None = None,
        *,
        name: str = "default",
    ) -> None:
        """Initialize player.

        Args:
            sink: Device sink receiving pulses
            config: Timing configuration (defaults to PlayerConfig())
            name: Player name attached to log records
        """
        self._sink = sink
        self._config = config or PlayerConfig()
        self.name = name
        self._logger = get_logger(__name__, player=name)

        self._session: PlaybackSession | None = None
        self._task: asyncio.Task[PlaybackState] | None = None
        self._handover = asyncio.Lock()
        self._initialized = False
        self._supported = False
        self._disposed = False

        self._on_complete: CompletionCallback | None = None
        self._on_error: ErrorCallback | None = None

    @property
    def sink(self) -> HapticSink:
        return self._sink

    @property
    def config(self) -> PlayerConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_playing(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def state(self) -> PlaybackState:
        """State of the active session (IDLE when nothing is playing)."""
        if self._session is None or not self.is_playing:
            return PlaybackState.IDLE
        return self._session.state

    @property
    def max_duration_ms(self) -> int:
        return self._sink.max_duration_ms

    def set_callbacks(
        self,
        on_complete: CompletionCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Set persistent callbacks fired for every play() call.

        Per-call callbacks passed to play() fire first.
        """
        self._on_complete = on_complete
        self._on_error = on_error

    async def initialize(self) -> bool:
        """Initialize the sink. Idempotent; never raises for sink failures.

        Returns:
            True if the sink reported haptics as available

        Raises:
            PlayerStateError: If the player has been disposed
        """
        self._ensure_not_disposed("initialize")
        if self._initialized:
            return self._supported

        try:
            self._supported = await self._sink.initialize()
        except Exception as e:
            self._logger.warning(f"Failed to initialize haptic sink: {e}")
            self._supported = False
            await self._invoke_callback(self._on_error, e)

        self._initialized = True
        self._logger.debug(f"Player initialized (supported={self._supported})")
        return self._supported

    async def is_supported(self) -> bool:
        """Ask the sink whether haptics are available. False on any error."""
        if self._disposed:
            return False
        try:
            return await self._sink.is_supported()
        except Exception as e:
            self._logger.warning(f"Failed to query haptic support: {e}")
            return False

    async def play(
        self,
        pattern: HapticPattern,
        on_complete: CompletionCallback | None = None,
        on_error: ErrorCallback | None = None,
        *,
        cancel_token: asyncio.Event | None = None,
        timeout_ms: int | None = None,
    ) -> PlaybackResult:
        """Play a pattern and wait for it to end.

        Args:
            pattern: Pattern to play
            on_complete: Called once if playback reaches its natural end
            on_error: Called once with the error on timeout or failure
            cancel_token: Optional caller-owned cancellation flag
            timeout_ms: Ceiling for the whole call (defaults to config.timeout_ms)

        Returns:
            PlaybackResult describing how playback ended

        Raises:
            PlayerStateError: If the player has been disposed
        """
        self._ensure_not_disposed("play")
        if not self._initialized:
            await self.initialize()

        # Serialize stop-then-start so at most one session is live
        async with self._handover:
            self._ensure_not_disposed("play")
            await self.stop()

            session = PlaybackSession(
                pattern,
                self._sink,
                self._config,
                cancel_token=cancel_token,
                logger=self._logger,
            )
            task = asyncio.create_task(session.run())
            self._session, self._task = session, task

        if timeout_ms is None:
            timeout_ms = self._config.timeout_ms

        self._logger.debug(
            f"Starting playback: {pattern} (timeout={format_ms(timeout_ms)})"
        )

        error: BaseException | None = None
        try:
            if timeout_ms is None:
                await task
            else:
                await asyncio.wait_for(task, timeout=timeout_ms / 1000.0)
        except asyncio.TimeoutError:
            outcome = PlaybackOutcome.TIMED_OUT
            error = PlaybackTimeoutError(timeout_ms)
        except asyncio.CancelledError:
            session.cancel()
            raise
        except Exception as e:
            self._logger.exception("Playback session failed")
            outcome = PlaybackOutcome.FAILED
            error = e
        else:
            if session.state is PlaybackState.COMPLETED:
                outcome = PlaybackOutcome.COMPLETED
            else:
                outcome = PlaybackOutcome.CANCELLED
        finally:
            self._release_session(task)

        result = PlaybackResult(
            outcome=outcome,
            triggers=session.triggers,
            failed_triggers=session.failed_triggers,
            iterations_completed=session.iteration,
            elapsed_ms=session.elapsed_ms,
            error=error,
        )

        if outcome is PlaybackOutcome.COMPLETED:
            self._logger.debug(f"Playback completed in {result.elapsed_ms:.0f}ms")
            await self._invoke_callback(on_complete)
            await self._invoke_callback(self._on_complete)
        elif error is not None:
            self._logger.warning(f"Playback {outcome.value}: {error}")
            await self._invoke_callback(on_error, error)
            await self._invoke_callback(self._on_error, error)
        else:
            self._logger.debug("Playback cancelled")

        return result

    async def stop(self) -> None:
        """Cancel the active session and wait for it to wind down.

        No-op when nothing is playing or the player is disposed.
        """
        if self._disposed:
            return

        session, task = self._session, self._task
        if session is None or task is None or task.done():
            return

        self._logger.debug("Stopping playback")
        session.cancel()

        # Called from inside the session (e.g. by a sink); cannot await ourselves
        if task is asyncio.current_task():
            return

        await asyncio.wait({task})
        self._release_session(task)

    async def reset(self) -> None:
        """Stop playback and return to idle."""
        await self.stop()
        self._logger.debug("Player reset")

    async def dispose(self) -> None:
        """Stop playback and release the sink. Idempotent.

        After dispose, play() and initialize() raise PlayerStateError and
        stop() is a no-op.
        """
        async with self._handover:
            if self._disposed:
                return

            await self.stop()
            try:
                await self._sink.release()
            except Exception as e:
                self._logger.warning(f"Error releasing haptic sink: {e}")
            finally:
                self._disposed = True
                self._initialized = False
                self._supported = False
                self._on_complete = None
                self._on_error = None
                self._logger.debug("Player disposed")

    def _release_session(self, task: asyncio.Task[PlaybackState]) -> None:
        if self._task is task:
            self._task = None
            self._session = None

    def _ensure_not_disposed(self, operation: str) -> None:
        if self._disposed:
            raise PlayerStateError(f"Cannot {operation}: player '{self.name}' has been disposed")

    async def _invoke_callback(self, callback: Callable[..., Any] | None, *args: Any) -> None:
        """Run a user callback; failures are logged, never propagated."""
        if callback is None:
            return
        try:
            result = callback(*args)
            if inspect.isawaitable(result):
                await result
        except Exception:
            self._logger.exception("Playback callback raised")
