# src/decayengine/log.py
"""
Logging setup for the calculator.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by the application entry point through :func:`setup_logging`.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

ROOT_LOGGER_NAME = "decayengine"


def setup_logging(level: int = logging.INFO, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Calling it again replaces the previous handlers instead of stacking them.

    Args:
        level: logging level (DEBUG, INFO, WARNING, ...)
        name: logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)

    return logger
