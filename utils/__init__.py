"""Utility modules for logging and exception handling."""

from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    ClusterClientError,
    ConnectionFailedError,
    TransportError,
    FramingError,
    NotConnectedError,
    MessageTooLargeError,
    ConfigurationError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'ClusterClientError',
    'ConnectionFailedError',
    'TransportError',
    'FramingError',
    'NotConnectedError',
    'MessageTooLargeError',
    'ConfigurationError',
]
