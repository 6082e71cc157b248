"""
Tests for the rotating log file setup.

python -m pytest tests/test_logging_config.py
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from unittest.mock import patch

import pytest

from config import logging_config


@pytest.fixture
def restore_root_logger():
    """Put back the root handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def log_settings(tmp_path):
    with patch("config.logging_config.settings") as mock_settings:
        mock_settings.general.LOG_LEVEL = "INFO"
        mock_settings.logging.LOG_DIR = str(tmp_path / "app-logs")
        mock_settings.logging.LOG_RETENTION_DAYS = 3
        yield mock_settings


class TestSetupLogging:

    def test_writes_to_configured_directory(self, tmp_path, log_settings, restore_root_logger):
        root = logging_config.setup_logging("cli")

        file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == 3
        assert (tmp_path / "app-logs" / "cli.log").exists()

    def test_relative_directory_follows_working_directory(self, tmp_path, monkeypatch, log_settings):
        monkeypatch.chdir(tmp_path)
        log_settings.logging.LOG_DIR = "logs"

        assert logging_config.get_log_file_path("cli") == tmp_path.resolve() / "logs" / "cli.log"

    def test_console_only(self, tmp_path, log_settings, restore_root_logger):
        root = logging_config.setup_logging("cli", log_to_file=False)

        assert not any(isinstance(h, TimedRotatingFileHandler) for h in root.handlers)
        assert not (tmp_path / "app-logs").exists()

    def test_httpx_is_quieted(self, log_settings, restore_root_logger):
        logging_config.setup_logging("cli", log_to_file=False)

        assert logging.getLogger("httpx").level == logging.WARNING
