"""Protocol module for value framing, operations and response decoding."""

from protocol.constants import MAX_TEXT_LENGTH, TAG_INT, TAG_FLOAT, TAG_TEXT
from protocol.commands import Operation, ResponseStatus
from protocol.encoding import Value, encode_value, decode_value
from protocol.messages import (
    Request,
    ClusterSet,
    Success,
    ServerError,
    Result,
    decode_response,
)

__all__ = [
    'MAX_TEXT_LENGTH',
    'TAG_INT',
    'TAG_FLOAT',
    'TAG_TEXT',
    'Operation',
    'ResponseStatus',
    'Value',
    'encode_value',
    'decode_value',
    'Request',
    'ClusterSet',
    'Success',
    'ServerError',
    'Result',
    'decode_response',
]
