"""Client module for the transport, protocol client and operator session."""

from client.connection import Connection
from client.cluster_client import ClusterClient
from client.session import InputProvider, ConsoleInput, SessionController

__all__ = [
    'Connection',
    'ClusterClient',
    'InputProvider',
    'ConsoleInput',
    'SessionController',
]
