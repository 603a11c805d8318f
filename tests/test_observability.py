"""
Tests for logging configuration.
"""

import logging
from pathlib import Path

import pytest

from kitsetup.core.observability.logging_config import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_flags_in_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("KITSETUP_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv("KITSETUP_LOG_LEVEL", raising=False)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_only(self, monkeypatch):
        monkeypatch.delenv("KITSETUP_LOG_FILE", raising=False)
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_is_warning(self, monkeypatch):
        monkeypatch.delenv("KITSETUP_LOG_FILE", raising=False)
        setup_logging("chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler_lowers_root_level(self, tmp_path: Path):
        log_file = tmp_path / "setup.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        logging.getLogger("kitsetup.test").debug("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()

    def test_file_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("KITSETUP_LOG_FILE", str(log_file))
        setup_logging("ERROR")
        assert len(logging.getLogger().handlers) == 2
