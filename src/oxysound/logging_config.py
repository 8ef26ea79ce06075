"""Logging configuration for the oxysound package."""

import logging
import sys
from typing import Optional

# Create logger
logger: logging.Logger = logging.getLogger("oxysound")
logger.setLevel(logging.INFO)

# Log to stderr, stdout carries playlist output
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setLevel(logging.INFO)

formatter = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

# Prevent propagation to root logger
logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to INFO level.
    """
    logger.setLevel(logging.INFO)
    console_handler.setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Module names inside the package (``oxysound.api``) are used as-is, any
    other name is nested under the package logger.

    Args:
        name: Name of the logger. If None, returns the package logger.

    Returns:
        A Logger instance configured with the application's settings.
    """
    if not name:
        return logger
    if name == "oxysound" or name.startswith("oxysound."):
        return logging.getLogger(name)
    if ".oxysound." in name:
        # Imported through the source tree, e.g. src.oxysound.api
        return logging.getLogger(name[name.index("oxysound.") :])
    return logging.getLogger(f"oxysound.{name}")
