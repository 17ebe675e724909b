"""Blocking stream transport exchanging typed values with the cluster server."""

from typing import Optional, Type
import socket

from protocol.encoding import Value, encode_value, decode_value
from utils.logging import get_logger
from utils.exceptions import (
    ConnectionFailedError,
    NotConnectedError,
    TransportError,
)

logger = get_logger(__name__)


class Connection:
    """
    Ordered typed-value channel over a single stream socket.

    Values written arrive at the peer in write order; each read blocks
    until one complete value frame is available. There is no retry and
    no timeout: any stream failure is terminal for the connection.
    """

    def __init__(self, sock: socket.socket):
        """
        Wrap an already connected stream socket.

        Args:
            sock: Connected stream socket, owned by this connection from now on
        """
        self._sock = sock
        self._is_open = True

    @classmethod
    def open(cls, addr: str, port: int) -> 'Connection':
        """
        Resolve the address and establish a stream connection.

        Args:
            addr: IP address or hostname of the server
            port: Port number of the server

        Returns:
            Open Connection

        Raises:
            ConnectionFailedError: If the address cannot be resolved or the
                connection is refused
        """
        logger.info(f"Connecting to {addr}:{port}")

        try:
            sock = socket.create_connection((addr, port))
        except OSError as e:
            logger.error(f"Cannot connect to {addr}:{port}: {e}")
            raise ConnectionFailedError(f"Failed to connect to {addr}:{port}: {e}") from e

        # Requests are a few small frames awaiting a reply
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        logger.info(f"Connected to {addr}:{port} from {sock.getsockname()}")
        return cls(sock)

    @property
    def is_open(self) -> bool:
        """Whether the connection can still carry values."""
        return self._is_open

    def write_value(self, value: Value) -> None:
        """
        Send one typed value on the outbound channel.

        Args:
            value: Integer, float or text value

        Raises:
            NotConnectedError: If the connection is closed
            TransportError: If the stream fails
        """
        self.write_values(value)

    def write_values(self, *values: Value) -> None:
        """
        Send several typed values in order as one write.

        Every value is encoded before any byte is sent, so an unencodable
        value never leaves a partial request on the stream.

        Raises:
            NotConnectedError: If the connection is closed
            TransportError: If the stream fails
        """
        self._ensure_open()
        data = b''.join(encode_value(value) for value in values)

        try:
            self._sock.sendall(data)
        except OSError as e:
            raise TransportError(f"Error sending data: {e}") from e

        logger.debug(f"Sent {len(values)} value(s), {len(data)} bytes")

    def read_value(self, expected: Optional[Type] = None) -> Value:
        """
        Block until one complete typed value is received.

        Args:
            expected: Required Python type (int, float or str), or None for any

        Returns:
            Decoded value

        Raises:
            NotConnectedError: If the connection is closed
            TransportError: If the stream closes or the value is malformed
        """
        self._ensure_open()
        value = decode_value(self._read_exact, expected)
        logger.debug(f"Received {type(value).__name__} value")
        return value

    def close(self) -> None:
        """
        Close the connection.

        This method is idempotent and can be called multiple times safely.
        """
        if not self._is_open:
            return

        self._is_open = False
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            # Peer may already have closed the stream
            pass
        finally:
            self._sock.close()

        logger.info("Connection closed")

    def __enter__(self) -> 'Connection':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if not self._is_open:
            raise NotConnectedError("Connection is closed")

    def _read_exact(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            try:
                chunk = self._sock.recv(size - len(buf))
            except OSError as e:
                raise TransportError(f"Error receiving data: {e}") from e
            if not chunk:
                raise TransportError(
                    f"Connection closed by server with {size - len(buf)} byte(s) pending"
                )
            buf.extend(chunk)
        return bytes(buf)
