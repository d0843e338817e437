"""
Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; ``setup_logger`` attaches
the single stdout handler to the package logger once at startup.
"""

import logging
import os
import sys

DEFAULT_FORMAT = (
    "%(asctime)s - [in %(pathname)s:%(lineno)d] - %(levelname)s - %(message)s"
)


def setup_logger(
    name="card_ssr",
    level=logging.INFO,
    format=DEFAULT_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
):
    """
    Configure and return a logger instance

    If environment variable LOG_LEVEL is set to DEBUG, force log level to DEBUG.

    Args:
        name: Logger name
        level: Logging level name or number, default is INFO
        format: Log message format
        datefmt: Date format for timestamps

    Returns:
        logging.Logger: Configured logger instance
    """
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level and env_log_level.upper() == "DEBUG":
        level = logging.DEBUG
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)

    # Prevent adding duplicate handlers
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(handler)

    return logger
