"""Sink that talks to a native vibration bridge over a method channel.

The native side (Android ``VibrationEffect``, iOS Core Haptics) is reached
through an abstract MethodChannel: a single async ``invoke_method(name,
arguments)`` entry point. This module owns the call shape, argument
clamping, lazy initialisation and retry policy; it never touches the
hardware itself.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from haptic_composer.core.config.models import ChannelConfig, Platform
from haptic_composer.core.errors import HapticError, PlayerStateError, SinkError
from haptic_composer.core.utils.math import clamp

logger = logging.getLogger(__name__)

# Longest single effect each platform accepts (milliseconds)
PLATFORM_MAX_DURATION_MS: dict[Platform, int] = {
    Platform.IOS: 5000,
    Platform.ANDROID: 10000,
    Platform.OTHER: 1000,
}

METHOD_INITIALIZE = "initialize"
METHOD_TRIGGER = "triggerEffect"
METHOD_IS_SUPPORTED = "isSupported"
METHOD_DISPOSE = "dispose"


class PlatformCallError(HapticError):
    """The native side reported an error for a method call.

    Attributes:
        code: Platform error code (e.g. "NO_VIBRATOR", "VIBRATION_ERROR")
        message: Optional human-readable message
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}" if message else code)


class MissingPluginError(HapticError):
    """No native handler is registered for the requested method."""


class MethodChannel(Protocol):
    """Async request/response bridge to native code."""

    async def invoke_method(self, method: str, arguments: dict[str, Any] | None = None) -> Any:
        """
        Invoke a native method.

        Raises:
            PlatformCallError: If the native side reports an error
            MissingPluginError: If no native handler exists
        """
        ...


class ChannelSink:
    """HapticSink backed by a MethodChannel.

    Handles:
    - Lazy initialisation on the first trigger
    - Parameter clamping to platform limits
    - Retry with linear back-off (``retry_delay_ms * attempt``)
    - Non-retryable platform codes and missing plugins

    Example:
        >>> sink = ChannelSink(channel, ChannelConfig(platform=Platform.ANDROID))
        >>> await sink.initialize()
        True
        >>> await sink.trigger(0.8, 50, 0.5)
    """

    def __init__(self, channel: MethodChannel, config: ChannelConfig | None = None) -> None:
        self._channel = channel
        self._config = config or ChannelConfig()
        self._initialized = False
        self._supported = False
        self._released = False

    @property
    def platform(self) -> Platform:
        return self._config.platform

    @property
    def max_duration_ms(self) -> int:
        return PLATFORM_MAX_DURATION_MS[self._config.platform]

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_released(self) -> bool:
        return self._released

    async def initialize(self) -> bool:
        """Initialize the native side once.

        Failures are logged and reported as unsupported; the sink is marked
        initialised either way so the native side is not asked again.

        Raises:
            PlayerStateError: If the sink has been released
        """
        if self._released:
            raise PlayerStateError("Cannot initialize a released ChannelSink")

        if self._initialized:
            logger.debug("ChannelSink already initialized, skipping")
            return self._supported

        try:
            self._supported = bool(await self._invoke_with_retry(METHOD_INITIALIZE))
        except SinkError as e:
            logger.warning(f"Haptics not available on this platform: {e}")
            self._supported = False

        self._initialized = True
        if self._supported:
            logger.debug("ChannelSink initialization successful")
        else:
            logger.info("Platform does not support haptics")
        return self._supported

    async def trigger(self, intensity: float, duration_ms: int, sharpness: float) -> None:
        """Fire one effect on the native side.

        Raises:
            SinkError: If the call still fails after all retries
        """
        if self._released:
            logger.debug("Ignoring trigger on released ChannelSink")
            return

        if not self._initialized:
            await self.initialize()
        if not self._supported:
            logger.debug("Haptics unavailable, skipping trigger")
            return

        valid_intensity = clamp(intensity, 0.0, 1.0)
        valid_duration = clamp(duration_ms, 1, self.max_duration_ms)
        valid_sharpness = clamp(sharpness, 0.0, 1.0)
        if (valid_intensity, valid_duration, valid_sharpness) != (intensity, duration_ms, sharpness):
            logger.debug(
                f"Parameter out of range, clamping: intensity={intensity}->{valid_intensity}, "
                f"duration={duration_ms}->{valid_duration}, sharpness={sharpness}->{valid_sharpness}"
            )

        arguments: dict[str, Any] = {"intensity": valid_intensity, "duration": valid_duration}
        if self._config.platform == Platform.IOS:
            arguments["sharpness"] = valid_sharpness

        await self._invoke_with_retry(METHOD_TRIGGER, arguments)

    async def is_supported(self) -> bool:
        """Ask the native side whether it can vibrate (False on any failure)."""
        if self._released:
            logger.debug("is_supported called on released ChannelSink")
            return False

        try:
            supported = bool(await self._invoke_with_retry(METHOD_IS_SUPPORTED))
        except SinkError as e:
            logger.warning(f"Error checking haptic support: {e}")
            return False

        logger.debug(f"Haptic feedback supported: {supported}")
        return supported

    async def release(self) -> None:
        """Tell the native side to stop and release the vibrator.

        Errors during cleanup are logged and ignored.
        """
        if self._released:
            logger.debug("ChannelSink already released, skipping")
            return

        try:
            await self._channel.invoke_method(METHOD_DISPOSE)
            logger.debug("ChannelSink released successfully")
        except (PlatformCallError, MissingPluginError) as e:
            logger.warning(f"Error during ChannelSink release: {e}")
        finally:
            self._released = True
            self._initialized = False
            self._supported = False

    async def _invoke_with_retry(self, method: str, arguments: dict[str, Any] | None = None) -> Any:
        """Invoke a channel method, retrying transient failures.

        Raises:
            SinkError: Wrapping the last failure once retries are exhausted,
                or immediately for missing plugins and non-retryable codes
        """
        max_attempts = self._config.max_retries + 1
        last_error: Exception | None = None

        for attempt in range(max_attempts):
            if attempt > 0:
                delay_ms = self._config.retry_delay_ms * attempt
                logger.debug(
                    f"Retrying {method} (attempt {attempt + 1}/{max_attempts}) after {delay_ms}ms"
                )
                await asyncio.sleep(delay_ms / 1000.0)

            try:
                return await self._channel.invoke_method(method, arguments)
            except MissingPluginError as e:
                raise SinkError(
                    "Plugin not implemented", method=method, attempts=attempt + 1, cause=e
                ) from e
            except PlatformCallError as e:
                last_error = e
                logger.debug(f"PlatformCallError on attempt {attempt + 1} for {method}: {e.code}")
                if e.code in self._config.non_retryable_codes:
                    raise SinkError(
                        e.message or "Platform call failed",
                        method=method,
                        code=e.code,
                        attempts=attempt + 1,
                        cause=e,
                    ) from e
            except Exception as e:
                last_error = e
                logger.debug(f"Error on attempt {attempt + 1} for {method}: {e}")

        raise SinkError(
            f"Failed after {max_attempts} attempts. Last error: {last_error}",
            method=method,
            code=getattr(last_error, "code", None),
            attempts=max_attempts,
            cause=last_error,
        ) from last_error
