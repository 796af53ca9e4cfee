"""
Logging Configuration
Sets up the package logger for the command-line tool.
"""
import logging
import os
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'thinfilmcalc' namespace.

    Prompts and result rows go to stdout, so console logging defaults to
    stderr. A log file, when given, is appended to and always records at
    least INFO so that a session can be reconstructed afterwards.

    Args:
        level: Console logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to append logs to.
        stream: Console stream, defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("thinfilmcalc")

    # Repeated calls (tests, re-entry through main()) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 1. Console Handler
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    file_level = level
    if log_file:
        directory = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(directory, exist_ok=True)

        file_level = min(level, logging.INFO)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(min(level, file_level))

    logger.info("Logging initialized.")
    return logger
