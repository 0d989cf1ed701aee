"""Tests for logging utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

import pytest

from haptic_composer.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="haptic_composer.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Tests for JSON log formatting."""

    def test_basic_fields(self):
        """Test level, message and logger name are emitted."""
        entry = json.loads(StructuredJSONFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert entry["context"]["logger_name"] == "haptic_composer.test"
        assert "timestamp" in entry

    def test_extra_fields_in_context(self):
        """Test extra attributes land in the context."""
        entry = json.loads(StructuredJSONFormatter().format(_record(player="main")))

        assert entry["context"]["player"] == "main"

    def test_exception_info(self):
        """Test exception details are included."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert entry["context"]["error_type"] == "ValueError"
        assert entry["context"]["error_message"] == "boom"


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger(self):
        """Test no context returns a plain logger."""
        assert isinstance(get_logger("haptic_composer.x"), logging.Logger)

    def test_adapter_with_context(self):
        """Test context kwargs return a LoggerAdapter."""
        logger = get_logger("haptic_composer.x", player="main")

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"player": "main"}


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_structured_file_output(self, tmp_path: Path, restore_root_logger: logging.Logger):
        """Test structured logging writes JSON lines to a file."""
        path = tmp_path / "haptics.jsonl"
        configure_logging(level="debug", filename=str(path), structured=True)

        get_logger("haptic_composer.test", player="main").info("played")
        for handler in restore_root_logger.handlers:
            handler.flush()

        entry = json.loads(path.read_text().strip().splitlines()[-1])
        assert entry["message"] == "played"
        assert entry["context"]["player"] == "main"
        assert restore_root_logger.level == logging.DEBUG

    def test_asyncio_logger_quieted(self, restore_root_logger: logging.Logger):
        """Test the asyncio logger is raised to ERROR."""
        configure_logging(level="INFO")

        assert logging.getLogger("asyncio").level == logging.ERROR
