"""Pytest configuration and fixtures for cluster client tests."""

from __future__ import annotations

import io
import select
import socket
from typing import Callable, Iterator

import pytest

from client.cluster_client import ClusterClient
from client.connection import Connection
from protocol.encoding import Value, decode_value, encode_value
from utils.exceptions import TransportError


class SimulatedPeer:
    """Server end of a socket pair speaking the value framing."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def send(self, *values: Value) -> None:
        self.sock.sendall(b"".join(encode_value(value) for value in values))

    def send_raw(self, data: bytes) -> None:
        self.sock.sendall(data)

    def read_value(self, expected: type | None = None) -> Value:
        return decode_value(self._read_exact, expected)

    def has_pending(self, timeout: float = 0.05) -> bool:
        """Return True if the client sent bytes that were not read yet."""
        readable, _, _ = select.select([self.sock], [], [], timeout)
        return bool(readable)

    def close_output(self) -> None:
        self.sock.shutdown(socket.SHUT_WR)

    def _read_exact(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            chunk = self.sock.recv(size - len(buf))
            if not chunk:
                raise TransportError("client closed")
            buf.extend(chunk)
        return bytes(buf)


def bytes_reader(data: bytes) -> Callable[[int], bytes]:
    """Create an exact-length reader over a byte string."""
    buf = io.BytesIO(data)

    def read_exact(size: int) -> bytes:
        chunk = buf.read(size)
        if len(chunk) < size:
            raise TransportError("end of data")
        return chunk

    return read_exact


@pytest.fixture
def socket_pair() -> Iterator[tuple[socket.socket, socket.socket]]:
    """Create a connected pair of stream sockets."""
    client_sock, server_sock = socket.socketpair()
    client_sock.settimeout(5)
    server_sock.settimeout(5)
    yield client_sock, server_sock
    client_sock.close()
    server_sock.close()


@pytest.fixture
def connection(socket_pair) -> Connection:
    """Create a Connection over the client end of the socket pair."""
    return Connection(socket_pair[0])


@pytest.fixture
def peer(socket_pair) -> SimulatedPeer:
    """Create a simulated server over the other end of the socket pair."""
    return SimulatedPeer(socket_pair[1])


@pytest.fixture
def cluster_client(connection) -> ClusterClient:
    """Create a ClusterClient over the test connection."""
    return ClusterClient(connection)
