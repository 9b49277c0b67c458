#!/usr/bin/env python3
"""
Logging utilities for richhdr
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "richhdr"


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_dir: str | Path | None = None,
) -> logging.Logger:
    """Setup logger with a console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if not log_to_file:
        return logger

    try:
        directory = Path(log_dir).expanduser() if log_dir else Path.home() / ".richhdr" / "logs"
        directory.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(directory / "richhdr.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        # Fallback to console only
        logger.warning(f"File logging disabled: {e}")

    return logger


def configure_logging_levels(verbose: bool, quiet: bool, default_level: int = logging.WARNING) -> None:
    """Configure logging levels based on verbosity settings; flags win over ``default_level``."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = default_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            continue
        handler.setLevel(level)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
