"""
Logging configuration for Drush
Provides structured logging with levels driven by console verbosity
"""
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logger(
    name: str = "drush",
    level: Optional[int] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with consistent formatting

    Args:
        name: Logger name (default: "drush")
        level: Log level (default: INFO, or DEBUG if Config.DEBUG is True)
        format_string: Custom format string (optional)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they already exist
    if logger.handlers:
        return logger

    # Import here to avoid circular dependency
    from ..core.config import Config

    if level is None:
        level = logging.DEBUG if Config.DEBUG else logging.INFO
    logger.setLevel(level)

    # stderr keeps command output on stdout clean
    handler = logging.StreamHandler(sys.stderr)

    if format_string is None:
        format_string = Config.LOG_FORMAT or DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger for a module

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    # Use the module name as the logger name
    logger_name = name.split('.')[-1] if '.' in name else name
    if logger_name == "drush":
        return setup_logger("drush")
    return setup_logger(f"drush.{logger_name}")


def level_for_verbosity(verbosity: int) -> int:
    """Map a console verbosity value onto a logging level"""
    from ..core.console import Verbosity

    if verbosity <= Verbosity.QUIET:
        return logging.ERROR
    if verbosity <= Verbosity.NORMAL:
        return logging.WARNING
    if verbosity <= Verbosity.VERBOSE:
        return logging.INFO
    return logging.DEBUG


def set_level(level: int, name: str = "drush") -> None:
    """
    Apply a level to a logger and every logger below it

    Module loggers do not propagate, so each one needs its own level.
    """
    logging.getLogger(name).setLevel(level)
    prefix = f"{name}."
    for logger_name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if logger_name.startswith(prefix) and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
