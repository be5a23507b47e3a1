# Area: Shared Tests
"""Tests for cribbage_client._shared.logging_config."""

import json
import logging

import pytest
from cribbage_client._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    setup_logging,
)


@pytest.fixture
def restore_logger():
    pkg_logger = logging.getLogger("cribbage_client")
    saved = (list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate)
    yield pkg_logger
    for handler in pkg_logger.handlers:
        handler.close()
    pkg_logger.handlers[:] = saved[0]
    pkg_logger.setLevel(saved[1])
    pkg_logger.propagate = saved[2]


def _record(level=logging.WARNING, msg="hello"):
    return logging.LogRecord("cribbage_client.test", level, __file__, 1, msg, None, None)


class TestFormatters:
    """Terminal and JSON formatters."""

    def test_terminal_colors_a_copy(self):
        """Test that coloring never changes the original record."""
        record = _record()
        text = TerminalFormatter("%(levelname)s %(message)s").format(record)
        assert text.startswith("\033[33mWARNING")
        assert record.levelname == "WARNING"

    def test_json_line(self):
        """Test that the JSON formatter writes one object per record."""
        payload = json.loads(JSONFormatter().format(_record(logging.INFO, "joined")))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "cribbage_client.test"
        assert payload["message"] == "joined"
        assert "error_type" not in payload


class TestSetupLogging:
    """Package logger setup."""

    def test_handlers_and_level(self, tmp_path, restore_logger):
        """Test that setup adds two handlers and stops propagation."""
        log_file = tmp_path / "logs" / "client.log"
        setup_logging(str(log_file), "debug")
        assert restore_logger.level == logging.DEBUG
        assert len(restore_logger.handlers) == 2
        assert restore_logger.propagate is False
        assert log_file.parent.exists()

    def test_unknown_level_name_defaults_to_info(self, tmp_path, restore_logger):
        """Test that an unknown level name means INFO."""
        setup_logging(str(tmp_path / "client.log"), "chatty")
        assert restore_logger.level == logging.INFO
