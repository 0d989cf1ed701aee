"""Shared pytest fixtures for haptic composer tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from haptic_composer.core.config.models import PlayerConfig
from haptic_composer.core.engine.player import HapticPlayer
from haptic_composer.core.models.builder import PatternBuilder
from haptic_composer.core.models.pattern import HapticPattern
from haptic_composer.core.sinks.recording import RecordingSink

# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def fast_config() -> PlayerConfig:
    """Player config with a short poll interval so cancellation is quick."""
    return PlayerConfig(poll_interval_ms=10, trigger_timeout_ms=100)


# ============================================================================
# Sink Fixtures
# ============================================================================


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Fresh in-memory sink."""
    return RecordingSink()


@pytest.fixture
async def player(
    recording_sink: RecordingSink, fast_config: PlayerConfig
) -> AsyncIterator[HapticPlayer]:
    """Initialized player on a recording sink; disposed after the test."""
    p = HapticPlayer(recording_sink, fast_config, name="test")
    await p.initialize()
    yield p
    await p.dispose()


# ============================================================================
# Pattern Fixtures
# ============================================================================


@pytest.fixture
def sample_pattern() -> HapticPattern:
    """pulse(0.8,50) / silence(100) / pulse(0.5,30), repeated twice (360ms)."""
    return PatternBuilder().pulse(0.8, 50).silence(100).pulse(0.5, 30).repeat(2).build()


@pytest.fixture
def short_pattern() -> HapticPattern:
    """Single 20ms pulse."""
    return PatternBuilder().pulse(0.6, 20).build()


@pytest.fixture
def long_pattern() -> HapticPattern:
    """Two-second pulse, long enough to be interrupted."""
    return PatternBuilder().pulse(0.7, 2000).build()
