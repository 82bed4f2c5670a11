"""Logging helpers for Thai Checkers (Mak-Hot)."""

import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT


def setup_logger(
    name: str = "makhot",
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level, as a number or a name like "DEBUG"

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # Console handler - uses simpler format
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler - uses detailed format
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
