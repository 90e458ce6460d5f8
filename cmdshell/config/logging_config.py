"""Logging configuration for cmdshell."""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = "cmdshell"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the command shell.

    Handlers go on the root logger; the level is applied to both the root and
    the ``cmdshell`` package logger so a later call (e.g. switching to DEBUG)
    replaces the earlier configuration.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Unknown names fall back to INFO.
        log_file: Optional path to a log file. If None, logs go to stdout.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    config = {
        'level': numeric_level,
        'format': LOG_FORMAT,
        'force': True,
    }

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stdout

    logging.basicConfig(**config)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    logging.getLogger(__name__).info(
        "Logging initialized at %s level (%s)", logging.getLevelName(numeric_level), log_file or "stdout"
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, typically ``__name__`` of the calling module."""
    return logging.getLogger(name)
