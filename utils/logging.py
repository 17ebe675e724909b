"""Logging configuration and utilities."""

from typing import Optional, TextIO
import logging
import sys


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the entire client.

    Log records go to stderr by default so they never interleave with the
    menu and cluster output the session writes to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Default: INFO
        stream: Destination stream for log records (default: sys.stderr)

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(stream if stream is not None else sys.stderr)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance configured for the module
    """
    return logging.getLogger(name)
