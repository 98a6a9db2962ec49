"""
Logging Configuration
=====================
Wires the 'integralanalysis' logger for the command line.

Results go to stdout, so log records go to stderr. A log file, when requested,
gets the full record with timestamps and always keeps DEBUG detail.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "integralanalysis"

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def level_for_verbosity(verbosity: int) -> int:
    """Map a count of -v flags to a level: none WARNING, one INFO, more DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[Union[str, os.PathLike]] = None,
) -> logging.Logger:
    """
    Configures the package logger. Safe to call repeatedly.

    Args:
        verbosity: Number of -v flags given on the command line.
        log_file: Optional path of a log file; parent folders are created.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    console_level = level_for_verbosity(verbosity)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    logger.debug(f"Logging initialized (console level {logging.getLevelName(console_level)}).")
    return logger
