"""
Logging configuration for the hash pipeline service.
"""

import logging

LOGGER_NAME = "hashforge"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger and return it."""
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level.upper())

    if not base_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        base_logger.addHandler(stream_handler)

    return base_logger
