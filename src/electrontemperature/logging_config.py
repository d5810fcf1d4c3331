"""
Logging Configuration
Sets up the package logger used by the analysis and the report entry point.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "electrontemperature"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'electrontemperature' namespace.

    Handlers from an earlier call are closed and replaced.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every line pair)
        log_file: Optional path to save logs to a file.
        stream: Console stream, stderr by default so the report on stdout stays clean.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers: list[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
