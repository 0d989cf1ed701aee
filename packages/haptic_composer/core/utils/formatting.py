"""Formatting helpers for log and error messages."""

from __future__ import annotations

from pydantic import ValidationError


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable line.

    Args:
        error: Validation error raised by a model

    Returns:
        Semicolon-separated "location: message" pairs

    Example:
        >>> format_validation_error(err)
        'intensity: Input should be less than or equal to 1'
    """
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def format_ms(duration_ms: float | None) -> str:
    """Format a millisecond duration, rendering None as unbounded."""
    if duration_ms is None:
        return "unbounded"
    return f"{duration_ms:g}ms"
