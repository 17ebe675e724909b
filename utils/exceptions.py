"""Custom exception classes for the cluster client."""


class ClusterClientError(Exception):
    """Base exception class for all cluster client errors."""
    pass


class ConnectionFailedError(ClusterClientError, ConnectionError):
    """Exception raised when the server address cannot be resolved or reached."""
    pass


class TransportError(ClusterClientError):
    """Exception raised when the stream fails, closes or carries malformed values."""
    pass


class FramingError(ClusterClientError):
    """Exception raised when a response status token is neither OK nor KO."""
    pass


class NotConnectedError(ClusterClientError):
    """Exception raised when an operation is issued on a closed client."""
    pass


class MessageTooLargeError(ClusterClientError):
    """Exception raised when a text value exceeds the maximum frame size."""
    pass


class ConfigurationError(ClusterClientError, ValueError):
    """Exception raised when configuration is invalid or missing."""
    pass
