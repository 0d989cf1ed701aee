"""Tests for pulse and silence events."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError
import pytest

from haptic_composer.core.errors import HapticError, PatternValidationError
from haptic_composer.core.models.event import (
    HapticEvent,
    PulseEvent,
    SilenceEvent,
    pulse,
    silence,
)


class TestPulse:
    """Tests for pulse event construction."""

    def test_pulse_fields(self):
        """Test pulse stores intensity, duration and sharpness."""
        event = pulse(0.8, 50, sharpness=0.3)

        assert event.kind == "pulse"
        assert event.intensity == 0.8
        assert event.duration_ms == 50
        assert event.sharpness == 0.3

    def test_sharpness_optional(self):
        """Test sharpness defaults to None."""
        assert pulse(0.5, 10).sharpness is None

    @pytest.mark.parametrize("intensity", [0.0, 1.0])
    def test_intensity_bounds_inclusive(self, intensity: float):
        """Test 0.0 and 1.0 are accepted intensities."""
        assert pulse(intensity, 10).intensity == intensity

    @pytest.mark.parametrize("intensity", [-0.1, 1.5])
    def test_intensity_out_of_range(self, intensity: float):
        """Test intensity outside [0, 1] is rejected."""
        with pytest.raises(PatternValidationError, match="intensity"):
            pulse(intensity, 10)

    @pytest.mark.parametrize("duration_ms", [0, -5, 30_001])
    def test_duration_out_of_range(self, duration_ms: int):
        """Test durations outside 1..30000ms are rejected."""
        with pytest.raises(PatternValidationError, match="duration_ms"):
            pulse(0.5, duration_ms)

    def test_sharpness_out_of_range(self):
        """Test sharpness above 1.0 is rejected."""
        with pytest.raises(PatternValidationError, match="sharpness"):
            pulse(0.5, 10, sharpness=1.2)

    def test_error_is_value_error(self):
        """Test validation errors can be caught as ValueError or HapticError."""
        with pytest.raises(ValueError):
            pulse(2.0, 10)
        with pytest.raises(HapticError):
            pulse(2.0, 10)

    def test_events_are_immutable(self):
        """Test events cannot be mutated after creation."""
        event = pulse(0.5, 10)
        with pytest.raises(ValidationError):
            event.intensity = 0.9  # type: ignore[misc]

    def test_extra_fields_forbidden(self):
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            PulseEvent(intensity=0.5, duration_ms=10, color="red")  # type: ignore[call-arg]

    def test_str(self):
        """Test string form includes sharpness only when set."""
        assert str(pulse(0.5, 10)) == "Pulse(intensity=0.5, duration=10ms)"
        assert str(pulse(0.5, 10, 0.2)) == "Pulse(intensity=0.5, duration=10ms, sharpness=0.2)"


class TestSilence:
    """Tests for silence event construction."""

    def test_silence_fields(self):
        """Test silence has a duration and reports zero intensity."""
        event = silence(100)

        assert event.kind == "silence"
        assert event.duration_ms == 100
        assert event.intensity == 0.0
        assert event.sharpness is None

    def test_silence_rejects_zero_duration(self):
        """Test silence duration must be positive."""
        with pytest.raises(PatternValidationError):
            silence(0)

    def test_silence_has_no_intensity_field(self):
        """Test silence does not accept an intensity."""
        with pytest.raises(ValidationError):
            SilenceEvent(duration_ms=10, intensity=0.5)  # type: ignore[call-arg]


class TestDiscriminatedUnion:
    """Tests for parsing events by kind."""

    def test_parses_by_kind(self):
        """Test the kind tag selects the event model."""
        adapter = TypeAdapter(HapticEvent)

        parsed_pulse = adapter.validate_python({"kind": "pulse", "intensity": 1, "duration_ms": 5})
        parsed_silence = adapter.validate_python({"kind": "silence", "duration_ms": 5})

        assert isinstance(parsed_pulse, PulseEvent)
        assert isinstance(parsed_silence, SilenceEvent)

    def test_unknown_kind_rejected(self):
        """Test an unknown kind fails validation."""
        adapter = TypeAdapter(HapticEvent)

        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "buzz", "duration_ms": 5})
