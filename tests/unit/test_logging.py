"""
Unit tests for the mazegen logging setup.
"""

import logging

import pytest

from mazegen.utils import logging as mazegen_logging
from mazegen.utils.logging import MazeFormatter, configure_logging, get_logger, parse_level


class TestGetLogger:
    """Test logger creation."""

    def test_same_instance(self):
        assert get_logger("mazegen.tests.a") is get_logger("mazegen.tests.a")

    def test_default_name_is_calling_module(self):
        assert get_logger().name == __name__

    def test_default_level_is_warning(self):
        logger = get_logger("mazegen.tests.default")
        assert logger.level == logging.WARNING
        assert logger.propagate is False


class TestConfigureLogging:
    """Test global configuration."""

    def test_level_applies_to_existing_loggers(self):
        logger = get_logger("mazegen.tests.level")

        configure_logging(level="DEBUG")

        assert logger.level == logging.DEBUG

    def test_records_go_to_stderr(self, capsys):
        logger = get_logger("mazegen.tests.stderr")
        configure_logging(level="INFO", use_colors=False)

        logger.info("grid allocated")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "grid allocated" in captured.err
        assert "INFO" in captured.err

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "mazegen.log"
        logger = get_logger("mazegen.tests.file")

        configure_logging(level="INFO", log_file=log_file, use_colors=False)
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
        assert "\033[" not in log_file.read_text()

    def test_reconfigure_drops_file_handler(self, tmp_path):
        logger = get_logger("mazegen.tests.file_off")
        configure_logging(level="INFO", log_file=tmp_path / "mazegen.log")
        assert len(logger.handlers) == 2

        configure_logging(level="INFO")

        assert len(logger.handlers) == 1

    def test_public_api(self):
        assert set(mazegen_logging.__all__) == {
            "MazeFormatter",
            "MazeLogger",
            "configure_logging",
            "get_logger",
            "parse_level",
        }


class TestParseLevel:
    """Test level name resolution."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
    )
    def test_known_levels(self, level, expected):
        assert parse_level(level) == expected

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="verbose"):
            parse_level("verbose")

    def test_unknown_level_leaves_configuration_unchanged(self):
        logger = get_logger("mazegen.tests.bad_level")

        with pytest.raises(ValueError):
            configure_logging(level="verbose")

        assert logger.level == logging.WARNING


class TestMazeFormatter:
    """Test record formatting."""

    def _record(self):
        return logging.LogRecord("mazegen.test", logging.WARNING, "grid.py", 42, "wall isolated", None, None)

    def test_plain(self):
        output = MazeFormatter(use_colors=False).format(self._record())

        assert "wall isolated" in output
        assert "WARNING" in output
        assert "\033[" not in output

    def test_location(self):
        output = MazeFormatter(include_location=True).format(self._record())
        assert "[grid.py:42]" in output

    def test_colors(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        output = MazeFormatter(use_colors=True).format(self._record())
        assert "\033[" in output
