"""Test the blocking value transport."""

import socket
from unittest.mock import MagicMock, patch

import pytest

from client.connection import Connection
from utils.exceptions import (
    ConnectionFailedError,
    NotConnectedError,
    TransportError,
)


def test_write_values_in_order(connection, peer):
    """Test values reach the peer in write order."""
    connection.write_value(0)
    connection.write_values("playtennis", 2.5)

    assert peer.read_value() == 0
    assert peer.read_value() == "playtennis"
    assert peer.read_value() == 2.5


def test_read_value(connection, peer):
    """Test values sent by the peer are read back with their types."""
    peer.send("OK", 7, "clusters")

    assert connection.read_value(str) == "OK"
    assert connection.read_value(int) == 7
    assert connection.read_value() == "clusters"


def test_read_value_split_frame(connection, peer):
    """Test a frame delivered in pieces is reassembled."""
    frame = b"S\x00\x00\x00\x05hello"
    peer.send_raw(frame[:3])
    peer.send_raw(frame[3:])

    assert connection.read_value(str) == "hello"


def test_read_value_wrong_type(connection, peer):
    """Test an unexpected value type is a transport error."""
    peer.send(3)

    with pytest.raises(TransportError):
        connection.read_value(str)


def test_read_after_peer_closed(connection, peer):
    """Test end of stream is a transport error."""
    peer.close_output()

    with pytest.raises(TransportError, match="closed by server"):
        connection.read_value()


def test_read_truncated_frame(connection, peer):
    """Test end of stream inside a frame is a transport error."""
    peer.send_raw(b"I\x00\x00")
    peer.close_output()

    with pytest.raises(TransportError):
        connection.read_value()


def test_unencodable_value_sends_nothing(connection, peer):
    """Test a batch with an unencodable value writes no bytes."""
    with pytest.raises(TypeError):
        connection.write_values(1, object())

    assert not peer.has_pending()


def test_send_failure_is_transport_error():
    """Test socket errors while sending become transport errors."""
    sock = MagicMock()
    sock.sendall.side_effect = BrokenPipeError("broken pipe")

    with pytest.raises(TransportError):
        Connection(sock).write_value(1)


def test_close_is_idempotent(connection):
    """Test closing twice is harmless."""
    connection.close()
    connection.close()

    assert not connection.is_open


def test_use_after_close(connection):
    """Test a closed connection refuses reads and writes."""
    connection.close()

    with pytest.raises(NotConnectedError):
        connection.write_value(0)
    with pytest.raises(NotConnectedError):
        connection.read_value()


def test_context_manager_closes(socket_pair):
    """Test leaving the context closes the connection."""
    with Connection(socket_pair[0]) as conn:
        assert conn.is_open

    assert not conn.is_open


def test_open_success():
    """Test open wraps the connected socket."""
    sock = MagicMock(spec=socket.socket)
    sock.getsockname.return_value = ("127.0.0.1", 50000)

    with patch("client.connection.socket.create_connection", return_value=sock) as create:
        conn = Connection.open("localhost", 8080)

    create.assert_called_once_with(("localhost", 8080))
    sock.setsockopt.assert_called_once_with(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
    assert conn.is_open


@pytest.mark.parametrize(
    "error",
    [
        ConnectionRefusedError("refused"),
        socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
    ],
)
def test_open_failure(error):
    """Test unresolvable or refusing servers raise ConnectionFailedError."""
    with patch("client.connection.socket.create_connection", side_effect=error):
        with pytest.raises(ConnectionFailedError) as exc_info:
            Connection.open("nowhere.invalid", 8080)

    assert exc_info.value.__cause__ is error
    assert isinstance(exc_info.value, ConnectionError)
