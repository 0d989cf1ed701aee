"""JSON serialization helpers for haptic patterns.

Wraps ``HapticPattern.to_record`` / ``from_record`` with JSON string
conversion and a versioned metadata envelope for export/import.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
import json
from typing import Any

from haptic_composer.core.errors import PatternFormatError
from haptic_composer.core.models.pattern import HapticPattern

EXPORT_FORMAT_VERSION = "1.0"


def to_json_string(pattern: HapticPattern, indent: int | None = None) -> str:
    """Serialize a pattern to a JSON string."""
    return json.dumps(pattern.to_record(), indent=indent)


def from_json_string(text: str) -> HapticPattern:
    """Parse a pattern from a JSON string.

    Raises:
        PatternFormatError: If the text is not JSON or not a valid pattern record
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PatternFormatError(f"Invalid haptic pattern JSON: {e}") from e
    return HapticPattern.from_record(data)


def export_with_metadata(
    pattern: HapticPattern,
    *,
    name: str,
    description: str | None = None,
) -> dict[str, Any]:
    """Wrap a pattern record with a name, format version and creation time.

    Example:
        >>> exported = export_with_metadata(pattern, name="Doorbell")
        >>> exported["version"]
        '1.0'
    """
    exported: dict[str, Any] = {
        "version": EXPORT_FORMAT_VERSION,
        "created_at": datetime.now(tz=UTC).isoformat(),
        "name": name,
    }
    if description is not None:
        exported["description"] = description
    exported["pattern"] = pattern.to_record()
    return exported


def import_from_metadata(data: Mapping[str, Any]) -> HapticPattern:
    """Extract the pattern from an ``export_with_metadata`` envelope.

    Raises:
        PatternFormatError: If the envelope has no pattern or the pattern is invalid
    """
    if "pattern" not in data:
        raise PatternFormatError("Missing pattern data in metadata")
    return HapticPattern.from_record(data["pattern"])


def pretty_print(pattern: HapticPattern) -> str:
    """Render a multi-line human-readable description of a pattern."""
    lines = [
        "HapticPattern {",
        f"  Duration: {pattern.total_duration_ms}ms",
        f"  Events: {pattern.event_count}",
    ]
    if pattern.repeat is not None:
        lines.append(f"  Repeat: {pattern.repeat}x")
    if pattern.delay_ms is not None:
        lines.append(f"  Delay: {pattern.delay_ms}ms")
    lines.append("  Events:")
    lines.extend(f"    {event}" for event in pattern.events)
    lines.append("}")
    return "\n".join(lines) + "\n"
