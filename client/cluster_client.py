"""Protocol client issuing clustering operations to the server."""

import threading

from client.connection import Connection
from protocol.commands import Operation
from protocol.messages import Request, Result, decode_response
from utils.logging import get_logger
from utils.exceptions import (
    FramingError,
    NotConnectedError,
    TransportError,
)

logger = get_logger(__name__)


class ClusterClient:
    """
    Client for the cluster mining server.

    Each operation writes its request, then blocks until the complete
    response is decoded. Server refusals come back as ServerError results
    and leave the client usable; transport and framing failures close the
    client and are raised.

    Ordering between operations (a table must be loaded before it is
    clustered, a cluster set computed before it is stored) is kept by the
    server and is not tracked here.
    """

    def __init__(self, connection: Connection):
        """
        Initialize the client over an open connection.

        Args:
            connection: Open connection, owned by this client from now on
        """
        self._connection = connection
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def connect(cls, addr: str, port: int) -> 'ClusterClient':
        """
        Open a connection to the server and wrap it in a client.

        Raises:
            ConnectionFailedError: If the server cannot be reached
        """
        return cls(Connection.open(addr, port))

    @property
    def is_closed(self) -> bool:
        """Whether the client has entered its terminal state."""
        return self._closed

    def load_table_from_db(self, table_name: str) -> Result:
        """
        Load a database table into the server.

        Args:
            table_name: Name of the table to load

        Returns:
            Success without payload, or ServerError
        """
        return self._call(Request(Operation.LOAD_TABLE_FROM_DB, table_name))

    def cluster_from_db_table(self, radius: float) -> Result:
        """
        Cluster the table loaded in the server.

        The radius must already be checked to be positive.

        Args:
            radius: Clustering radius

        Returns:
            Success with a ClusterSet payload, or ServerError
        """
        return self._call(Request(Operation.CLUSTER_FROM_DB_TABLE, float(radius)))

    def store_cluster_to_file(self, file_name: str) -> Result:
        """
        Store the last computed cluster set in a server-side file.

        Args:
            file_name: Name of the file to write on the server

        Returns:
            Success without payload, or ServerError
        """
        return self._call(Request(Operation.STORE_CLUSTER_TO_FILE, file_name))

    def cluster_from_file(self, file_name: str) -> Result:
        """
        Load a cluster set from a server-side file.

        Args:
            file_name: Name of the file to read on the server

        Returns:
            Success with the cluster set description as payload, or ServerError
        """
        return self._call(Request(Operation.CLUSTER_FROM_FILE, file_name))

    def close(self) -> None:
        """
        Close the client and its connection.

        This method is idempotent and can be called multiple times safely.
        """
        with self._lock:
            self._shutdown()

    def __enter__(self) -> 'ClusterClient':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _call(self, request: Request) -> Result:
        values = request.values()

        with self._lock:
            if self._closed:
                raise NotConnectedError(
                    f"Cannot issue {request.operation.name}: client is closed"
                )

            logger.info(f"Sending {request.operation.name}")
            try:
                self._connection.write_values(*values)
                result = decode_response(request.operation, self._connection.read_value)
            except (TransportError, FramingError):
                logger.error(
                    f"{request.operation.name} failed, closing connection",
                    exc_info=True
                )
                self._shutdown()
                raise

        if result.ok:
            logger.info(f"{request.operation.name} succeeded")
        else:
            logger.warning(f"{request.operation.name} refused by server: {result.message}")
        return result

    def _shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._connection.close()
