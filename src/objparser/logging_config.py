"""
Logging Configuration
Sets up the package logger for command-line use.
"""
import logging
import sys
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'objparser' namespace.

    The library itself never calls this; it only emits records through
    module loggers. The CLI calls it once at start-up.

    The console gets short "LEVEL: message" lines at `level`. The optional
    log file always records DEBUG and above, with timestamps and the
    emitting module and line, so a run can be inspected after the fact.

    Args:
        level: Console logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save a full debug log to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("objparser")
    logger.setLevel(logging.DEBUG if log_file else level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # stderr: stdout carries the JSON record
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized (console={logging.getLevelName(level)}, file={log_file}).")
    return logger
