"""
Logging configuration for the spkcheb package.

Every module obtains its logger through get_logger so that formatting and
level control are consistent across the package.
"""

import logging
import os
import sys

# Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

LOG_LEVEL_ENV_VAR = "SPKCHEB_LOG_LEVEL"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        root_logger = logging.getLogger("spkcheb")
        if root_logger.level != logging.NOTSET:
            log_level = root_logger.level
        else:
            log_level = _get_log_level()
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
    return logger


def _get_log_level() -> int:
    """
    Get the logging level from the environment.

    Returns:
        The level named by SPKCHEB_LOG_LEVEL, or DEFAULT_LOG_LEVEL
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()

    if log_level_str == "DEBUG":
        return logging.DEBUG
    elif log_level_str == "INFO":
        return logging.INFO
    elif log_level_str == "WARNING":
        return logging.WARNING
    elif log_level_str == "ERROR":
        return logging.ERROR
    elif log_level_str == "CRITICAL":
        return logging.CRITICAL
    else:
        return DEFAULT_LOG_LEVEL


def set_log_level(level: int) -> None:
    """
    Set the logging level for all spkcheb loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root_logger = logging.getLogger("spkcheb")
    root_logger.setLevel(level)

    # Child loggers were given explicit levels by get_logger
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("spkcheb.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
