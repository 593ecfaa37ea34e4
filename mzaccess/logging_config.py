"""
Logging configuration for scripts and notebooks that use mzaccess.

The library logs through the module-level ``logging`` functions and never
installs handlers itself. Call :func:`setup_logging` once from an application.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from .config import LOG_BACKUP_COUNT, LOG_FILE_MAX_SIZE_MB, MB_TO_BYTES

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a console handler and an optional rotating file.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        log_file: Optional path of a log file, rotated at
            ``LOG_FILE_MAX_SIZE_MB`` with ``LOG_BACKUP_COUNT`` backups
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_SIZE_MB * MB_TO_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.debug(f"Logging initialized at level {logging.getLevelName(level)}")
