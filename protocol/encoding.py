"""Typed value encoding and decoding functions."""

from typing import Callable, Optional, Type, Union
import struct

from protocol.constants import (
    TAG_FORMAT,
    TAG_SIZE,
    TAG_INT,
    TAG_FLOAT,
    TAG_TEXT,
    INT_FORMAT,
    INT_SIZE,
    FLOAT_FORMAT,
    FLOAT_SIZE,
    LENGTH_FORMAT,
    LENGTH_SIZE,
    MAX_TEXT_LENGTH,
    TEXT_ENCODING,
)
from utils.exceptions import MessageTooLargeError, TransportError

Value = Union[int, float, str]

# Exact-length reader supplied by the transport
ReadExact = Callable[[int], bytes]

_TAG_TYPES = {
    TAG_INT: int,
    TAG_FLOAT: float,
    TAG_TEXT: str,
}


def encode_value(value: Value) -> bytes:
    """
    Encode one typed value into a tagged frame.

    Args:
        value: Integer, float or text value

    Returns:
        Tag byte followed by the big-endian body

    Raises:
        TypeError: If the value type has no wire representation
        ValueError: If an integer does not fit in 64 bits
        MessageTooLargeError: If encoded text exceeds MAX_TEXT_LENGTH
    """
    # bool is an int subclass but has no wire representation
    if isinstance(value, bool):
        raise TypeError("Boolean values cannot be encoded")

    if isinstance(value, int):
        try:
            body = struct.pack(INT_FORMAT, value)
        except struct.error as e:
            raise ValueError(f"Integer {value} does not fit in 64 bits") from e
        return struct.pack(TAG_FORMAT, TAG_INT) + body

    if isinstance(value, float):
        return struct.pack(TAG_FORMAT, TAG_FLOAT) + struct.pack(FLOAT_FORMAT, value)

    if isinstance(value, str):
        data = value.encode(TEXT_ENCODING)
        if len(data) > MAX_TEXT_LENGTH:
            raise MessageTooLargeError(
                f"Text size {len(data)} exceeds limit {MAX_TEXT_LENGTH}"
            )
        return (
            struct.pack(TAG_FORMAT, TAG_TEXT)
            + struct.pack(LENGTH_FORMAT, len(data))
            + data
        )

    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def decode_value(read_exact: ReadExact, expected: Optional[Type] = None) -> Value:
    """
    Decode the next tagged frame from a stream.

    Args:
        read_exact: Callable returning exactly n bytes or raising TransportError
        expected: Python type the caller requires (int, float or str), or None

    Returns:
        Decoded value

    Raises:
        TransportError: If the tag is unknown, the type differs from expected,
            the declared text length is out of bounds or the text is not UTF-8
    """
    (tag,) = struct.unpack(TAG_FORMAT, read_exact(TAG_SIZE))
    value_type = _TAG_TYPES.get(tag)
    if value_type is None:
        raise TransportError(f"Unknown value tag {tag!r}")
    if expected is not None and value_type is not expected:
        raise TransportError(
            f"Expected {expected.__name__} value, received {value_type.__name__}"
        )

    if value_type is int:
        (value,) = struct.unpack(INT_FORMAT, read_exact(INT_SIZE))
        return value

    if value_type is float:
        (value,) = struct.unpack(FLOAT_FORMAT, read_exact(FLOAT_SIZE))
        return value

    (length,) = struct.unpack(LENGTH_FORMAT, read_exact(LENGTH_SIZE))
    if length > MAX_TEXT_LENGTH:
        raise TransportError(f"Declared text size {length} exceeds limit {MAX_TEXT_LENGTH}")
    data = read_exact(length) if length else b''
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise TransportError("Text value is not valid UTF-8") from e
