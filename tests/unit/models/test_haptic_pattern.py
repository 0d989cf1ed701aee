"""Tests for HapticPattern: construction, derived values and records."""

from __future__ import annotations

import logging

import pytest

from haptic_composer.core.errors import PatternFormatError, PatternValidationError
from haptic_composer.core.models.event import PulseEvent, SilenceEvent, pulse, silence
from haptic_composer.core.models.pattern import INFINITE_REPEAT, HapticPattern

# ============================================================================
# Construction
# ============================================================================


class TestCreate:
    """Tests for pattern construction."""

    def test_create_keeps_order(self):
        """Test events are stored in the given order."""
        events = [pulse(0.8, 50), silence(100), pulse(0.5, 30)]
        pattern = HapticPattern.create(events)

        assert list(pattern.events) == events

    def test_empty_events_rejected(self):
        """Test a pattern needs at least one event."""
        with pytest.raises(PatternValidationError, match="events"):
            HapticPattern.create([])

    @pytest.mark.parametrize("repeat", [0, -1])
    def test_non_positive_repeat_rejected(self, repeat: int):
        """Test repeat must be positive."""
        with pytest.raises(PatternValidationError):
            HapticPattern.create([pulse(0.5, 10)], repeat=repeat)

    def test_negative_delay_rejected(self):
        """Test delay cannot be negative."""
        with pytest.raises(PatternValidationError):
            HapticPattern.create([pulse(0.5, 10)], delay_ms=-1)

    def test_zero_delay_allowed(self):
        """Test delay of zero is accepted."""
        assert HapticPattern.create([pulse(0.5, 10)], delay_ms=0).delay_ms == 0

    def test_infinite_repeat(self):
        """Test the infinite marker is accepted."""
        pattern = HapticPattern.create([pulse(0.5, 10)], repeat=INFINITE_REPEAT)

        assert pattern.is_infinite
        assert pattern.iterations is None
        assert pattern.playback_duration_ms is None


# ============================================================================
# Derived Values
# ============================================================================


class TestDerivedValues:
    """Tests for durations and counts."""

    def test_total_duration_is_one_pass(self, sample_pattern: HapticPattern):
        """Test total duration sums one pass and ignores repeat."""
        assert sample_pattern.total_duration_ms == 180

    def test_playback_duration_includes_repeat_and_delay(self):
        """Test playback duration covers delay and every pass."""
        pattern = HapticPattern.create(
            [pulse(0.5, 40), silence(60)], repeat=3, delay_ms=100
        )

        assert pattern.playback_duration_ms == 100 + 3 * 100

    def test_repeat_absent_plays_once(self):
        """Test missing repeat means a single pass."""
        pattern = HapticPattern.create([pulse(0.5, 10)])

        assert pattern.repeat is None
        assert pattern.iterations == 1

    def test_counts(self, sample_pattern: HapticPattern):
        """Test event and pulse counts."""
        assert sample_pattern.event_count == 3
        assert sample_pattern.pulse_count == 2

    def test_copy_with_revalidates(self, sample_pattern: HapticPattern):
        """Test copy_with replaces fields and keeps the rest."""
        copy = sample_pattern.copy_with(delay_ms=25)

        assert copy.delay_ms == 25
        assert copy.repeat == 2
        assert copy.events == sample_pattern.events

        with pytest.raises(PatternValidationError):
            sample_pattern.copy_with(events=[])

    def test_long_single_pass_warns(self, caplog: pytest.LogCaptureFixture):
        """Test a repeating pattern whose one pass exceeds 30s logs a warning."""
        with caplog.at_level(logging.WARNING, logger="haptic_composer.core.models.pattern"):
            HapticPattern.create([pulse(0.5, 30_000), silence(10)], repeat=2)

        assert "exceeds recommended maximum" in caplog.text

    def test_long_total_playback_does_not_warn(self, caplog: pytest.LogCaptureFixture):
        """Test only one pass counts: 2 x 20s with a delay stays quiet."""
        with caplog.at_level(logging.WARNING, logger="haptic_composer.core.models.pattern"):
            HapticPattern.create([pulse(0.5, 20_000)], repeat=2, delay_ms=5000)

        assert "exceeds recommended maximum" not in caplog.text

    def test_str(self):
        """Test string form lists optional fields only when set."""
        pattern = HapticPattern.create([pulse(0.5, 10), silence(20)], repeat=2)

        assert str(pattern) == "HapticPattern(events: 2, duration: 30ms, repeat: 2)"


# ============================================================================
# Records
# ============================================================================


class TestRecords:
    """Tests for to_record/from_record."""

    def test_to_record_shape(self):
        """Test record uses kind tags and omits unset fields."""
        pattern = HapticPattern.create([pulse(0.8, 50), silence(100)], repeat=2)

        assert pattern.to_record() == {
            "events": [
                {"kind": "pulse", "intensity": 0.8, "duration_ms": 50},
                {"kind": "silence", "duration_ms": 100},
            ],
            "repeat": 2,
        }

    def test_round_trip(self):
        """Test a pattern with every optional field survives a round trip."""
        pattern = HapticPattern.create(
            [pulse(0.8, 50, sharpness=0.9), silence(100), pulse(0.5, 30)],
            repeat=INFINITE_REPEAT,
            delay_ms=10,
        )

        assert HapticPattern.from_record(pattern.to_record()) == pattern

    def test_legacy_record(self):
        """Test records using the old type/duration/delay keys are accepted."""
        record = {
            "events": [
                {"type": "impact", "intensity": 0.8, "duration": 50},
                {"type": "pause", "duration": 100},
                {"type": "continuous", "intensity": 0.4, "duration": 300, "sharpness": 0.2},
            ],
            "repeat": 2,
            "delay": 15,
        }

        pattern = HapticPattern.from_record(record)

        assert isinstance(pattern.events[0], PulseEvent)
        assert isinstance(pattern.events[1], SilenceEvent)
        assert pattern.events[2].sharpness == 0.2
        assert pattern.delay_ms == 15
        assert pattern.repeat == 2

    def test_missing_events(self):
        """Test a record without events is rejected."""
        with pytest.raises(PatternFormatError, match="events"):
            HapticPattern.from_record({"repeat": 2})

    def test_empty_events(self):
        """Test a record with an empty event list is rejected."""
        with pytest.raises(PatternFormatError, match="at least one"):
            HapticPattern.from_record({"events": []})

    def test_events_not_a_list(self):
        """Test events must be a list."""
        with pytest.raises(PatternFormatError):
            HapticPattern.from_record({"events": "pulse"})

    def test_record_not_a_mapping(self):
        """Test non-mapping records are rejected."""
        with pytest.raises(PatternFormatError):
            HapticPattern.from_record([1, 2, 3])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("event", "message"),
        [
            ({"intensity": 0.5, "duration_ms": 10}, "kind"),
            ({"kind": "pulse", "intensity": 0.5}, "duration_ms"),
            ({"kind": "pulse", "duration_ms": 10}, "intensity"),
            ({"kind": "buzz", "duration_ms": 10}, "invalid event kind"),
            ({"kind": 7, "duration_ms": 10}, "invalid event kind"),
            ("pulse", "mapping"),
        ],
    )
    def test_malformed_event(self, event: object, message: str):
        """Test malformed event records name the problem."""
        with pytest.raises(PatternFormatError, match=message):
            HapticPattern.from_record({"events": [event]})

    def test_out_of_range_value(self):
        """Test out-of-range values in a record raise PatternFormatError."""
        record = {"events": [{"kind": "pulse", "intensity": 3.0, "duration_ms": 10}]}

        with pytest.raises(PatternFormatError, match="intensity"):
            HapticPattern.from_record(record)

    def test_invalid_repeat(self):
        """Test a zero repeat in a record is rejected."""
        record = {"events": [{"kind": "silence", "duration_ms": 10}], "repeat": 0}

        with pytest.raises(PatternFormatError):
            HapticPattern.from_record(record)
