"""
Logging utilities for simple-loc-compat
Centralized logging configuration for the lookup helpers
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    log_level = level or logging.INFO
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def configure_logging(level: str = "INFO", package: str = "simple_loc") -> None:
    """
    Apply a log level to every logger of a package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        package: Logger name prefix (the package logger and its children)
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    for name, logger in list(logging.root.manager.loggerDict.items()):
        # Placeholders stand in for loggers that were never created
        if not isinstance(logger, logging.Logger):
            continue
        if name != package and not name.startswith(f"{package}."):
            continue
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setLevel(log_level)


def get_i18n_logger(name: str = "i18n") -> logging.Logger:
    """Get a simple_loc logger at the configured level."""
    from simple_loc.config import get_settings

    return get_logger(f"simple_loc.{name}", level=get_settings().log_level)
