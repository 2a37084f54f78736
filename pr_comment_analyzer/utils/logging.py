"""
Logging configuration and utilities
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pr_comment_analyzer"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    name: Optional[str] = None,
) -> logging.Logger:
    """
    Setup logging configuration

    Handlers are attached to the package root logger only; module loggers
    propagate to it. Output goes to stderr so stdout carries just the report.

    Args:
        level: Log level
        format_string: Log format string
        name: Logger name, the package root by default

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name or ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
