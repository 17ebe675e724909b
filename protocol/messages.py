"""Request and response structure definitions."""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Type, Union

from protocol.commands import Operation, ResponseStatus
from protocol.encoding import Value
from utils.exceptions import FramingError

# Typed reader supplied by the transport
ReadValue = Callable[[Optional[Type]], Value]

# Type of the single argument following each operation code
REQUEST_ARGUMENT: Dict[Operation, Type] = {
    Operation.LOAD_TABLE_FROM_DB: str,
    Operation.CLUSTER_FROM_DB_TABLE: float,
    Operation.STORE_CLUSTER_TO_FILE: str,
    Operation.CLUSTER_FROM_FILE: str,
}

# Types of the values following an OK status, in wire order
RESPONSE_PAYLOAD: Dict[Operation, Tuple[Type, ...]] = {
    Operation.LOAD_TABLE_FROM_DB: (),
    Operation.CLUSTER_FROM_DB_TABLE: (int, str),
    Operation.STORE_CLUSTER_TO_FILE: (),
    Operation.CLUSTER_FROM_FILE: (str,),
}


@dataclass(frozen=True)
class Request:
    """One request: an operation code followed by its argument."""

    operation: Operation
    argument: Value

    def values(self) -> Tuple[Value, ...]:
        """
        Return the request as the ordered sequence of wire values.

        Raises:
            TypeError: If the argument type does not match the operation
        """
        expected = REQUEST_ARGUMENT[self.operation]
        if isinstance(self.argument, bool) or not isinstance(self.argument, expected):
            raise TypeError(
                f"{self.operation.name} takes a {expected.__name__} argument, "
                f"got {type(self.argument).__name__}"
            )
        return (int(self.operation), self.argument)


@dataclass(frozen=True)
class ClusterSet:
    """Cluster set computed from a database table."""

    count: int
    description: str


@dataclass(frozen=True)
class Success:
    """Successful response carrying the operation-specific payload."""

    payload: Any = None
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class ServerError:
    """Response refused by the server, carrying its message."""

    message: str
    ok: ClassVar[bool] = False


Result = Union[Success, ServerError]


def decode_response(operation: Operation, read_value: ReadValue) -> Result:
    """
    Decode the response to a request from the inbound channel.

    Reads the status token, then either the error message or the
    success payload declared for the operation, and nothing more.

    Args:
        operation: Operation of the request being answered
        read_value: Callable reading one value of the given type

    Returns:
        Success with the decoded payload, or ServerError

    Raises:
        FramingError: If the status token is neither OK nor KO
        TransportError: If the stream fails before the response is complete
    """
    status = read_value(str)
    if status == ResponseStatus.KO.value:
        return ServerError(message=read_value(str))
    if status != ResponseStatus.OK.value:
        raise FramingError(f"Unexpected status token {status!r} for {operation.name}")

    values = [read_value(value_type) for value_type in RESPONSE_PAYLOAD[operation]]

    if operation == Operation.CLUSTER_FROM_DB_TABLE:
        count, description = values
        return Success(ClusterSet(count=count, description=description))
    if operation == Operation.CLUSTER_FROM_FILE:
        return Success(values[0])
    return Success()
