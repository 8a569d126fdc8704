"""
Tests for environment-driven runtime config and logging setup.
"""

import io
import logging
from pathlib import Path

import pytest

from minigrep.config import RuntimeConfig, color_enabled, load_runtime_config, supports_color
from minigrep.logs import LOGGER_NAME, RunStats, log_stats, setup_logging

pytestmark = pytest.mark.unit


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestRuntimeConfig:
    def test_defaults(self):
        assert load_runtime_config({}) == RuntimeConfig()

    def test_reads_environment(self, tmp_path):
        cfg = load_runtime_config(
            {
                "MINIGREP_DEBUG": "yes",
                "MINIGREP_LOG_DIR": str(tmp_path),
                "NO_COLOR": "anything",
                "CLICOLOR_FORCE": "1",
            }
        )
        assert cfg == RuntimeConfig(debug=True, log_dir=tmp_path, no_color=True, force_color=True)

    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_falsy_debug(self, value):
        assert not load_runtime_config({"MINIGREP_DEBUG": value}).debug

    def test_blank_log_dir_ignored(self):
        assert load_runtime_config({"MINIGREP_LOG_DIR": "  "}).log_dir is None

    def test_uses_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_DEBUG", "1")
        assert load_runtime_config().debug


class TestColorEnabled:
    """NO_COLOR beats CLICOLOR_FORCE, which beats tty detection."""

    def test_tty_detection(self):
        assert supports_color(FakeTTY())
        assert not supports_color(io.StringIO())
        assert not supports_color(object())

    @pytest.mark.parametrize(
        "config, tty, expected",
        [
            (RuntimeConfig(), True, True),
            (RuntimeConfig(), False, False),
            (RuntimeConfig(force_color=True), False, True),
            (RuntimeConfig(no_color=True), True, False),
            (RuntimeConfig(no_color=True, force_color=True), False, False),
        ],
    )
    def test_precedence(self, config, tty, expected):
        stream = FakeTTY() if tty else io.StringIO()
        assert color_enabled(config, stream) is expected


class TestSetupLogging:
    def test_console_only(self, capsys):
        logger, log_path = setup_logging(debug=False)
        assert log_path is None
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        logger.info("quiet")
        logger.warning("loud")
        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "WARNING: loud" in err

    def test_file_handler(self, tmp_path):
        logger, log_path = setup_logging(debug=True, log_dir=tmp_path / "logs")
        assert logger.level == logging.DEBUG
        assert log_path.parent == tmp_path / "logs"
        assert log_path.name.startswith("log_") and log_path.suffix == ".txt"

        logging.getLogger(f"{LOGGER_NAME}.files").debug("child message")
        stats = RunStats(files_seen=1, files_read=1, lines_seen=3, lines_reported=2, elapsed_s=0.5)
        log_stats(logger, stats)

        text = Path(log_path).read_text(encoding="utf-8")
        assert "Log started:" in text
        assert "DEBUG: child message" in text
        assert "files_seen=1 files_read=1 lines_seen=3 lines_reported=2 elapsed=0.500000s" in text

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(debug=False, log_dir=tmp_path)
        logger, _ = setup_logging(debug=False)
        assert len(logger.handlers) == 1
