"""
Centralised logging configuration with daily rotation.

Each entry point writes to its own file in LOG_DIR (default ./logs):
- logs/cli.log → command line uploads and chat

Files rotate at midnight and are removed after LOG_RETENTION_DAYS days.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

from config.settings import settings

# Configuration
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(service_name: str = "cli", log_to_file: bool = True) -> logging.Logger:
    """
    Configure logging with daily rotation for one service.

    Args:
        service_name: Service name. Defines the log file:
                     - "cli" → logs/cli.log
        log_to_file: Also write to the rotating file handler

    Returns:
        Configured root logger
    """
    log_level = getattr(logging, settings.general.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Avoid duplicated handlers on repeated setup
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: console (stderr keeps stdout free for command output)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        # Handler 2: file with daily rotation
        get_logs_directory().mkdir(parents=True, exist_ok=True)
        log_file = get_log_file_path(service_name)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=settings.logging.LOG_RETENTION_DAYS,
            encoding="utf-8",
            utc=False
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        # Suffix for rotated files: cli.log.2026-01-23
        file_handler.suffix = "%Y-%m-%d"

        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging started [{service_name}]")

    return root_logger


def get_log_file_path(service_name: str = "cli") -> Path:
    """Return the log file path of a service."""
    return get_logs_directory() / f"{service_name}.log"


def get_logs_directory() -> Path:
    """Return the logs directory. Relative paths resolve against the working directory."""
    return Path(settings.logging.LOG_DIR).resolve()
