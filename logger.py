"""Logging configuration for CTF Notice.

Everything logs through the one "ctf_notice" logger. Runs append to a
per-day file under LOG_DIR, and also to stdout so cron mail and CI job
logs capture the same lines.
"""

import logging
import sys
from datetime import datetime, timezone

from config import LOG_DIR, LOG_LEVEL

LOGGER_NAME = "ctf_notice"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def log_file_path(now: datetime = None) -> str:
    """Today's log file (UTC date, matching the scheduler's clock)."""
    now = now or datetime.now(timezone.utc)
    return str(LOG_DIR / f"ctf-notice-{now:%Y-%m-%d}.log")


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the shared logger with file and stdout handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level(level))
    logger.propagate = False

    # Re-running setup must not duplicate output
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file_path(), encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    # Missing under pythonw / some service managers
    if sys.stdout is not None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    return logger


# Global logger instance
logger = setup_logging()
