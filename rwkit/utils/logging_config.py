#!/usr/bin/env python3
"""
Logging configuration for rwkit.
Provides file + console logging with configurable levels.
"""

import logging
import sys
from typing import Optional

from ..config import LOG_FILE, LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL, LOGGER_NAME


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for the rwkit command line.

    Console output goes to stderr so that tables and data written to
    stdout stay clean.

    Args:
        debug: If True, sets console level to DEBUG.
        log_file: Override for the log file location.

    Returns:
        The root rwkit logger.
    """
    level = logging.DEBUG if debug else LOG_LEVEL
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter

    # Remove existing handlers to avoid duplicates on re-init
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    path = str(log_file or LOG_FILE)
    try:
        file_handler = logging.FileHandler(path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError:
        root_logger.warning("Could not create log file at %s", path)

    return root_logger


def get_logger(logger: Optional[logging.Logger], name: str) -> logging.Logger:
    """Return the injected logger, or the module logger called ``name``."""
    if logger is not None:
        return logger
    return logging.getLogger(name)
