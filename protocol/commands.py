"""Protocol operation and status definitions."""

from enum import Enum, IntEnum


class Operation(IntEnum):
    """Enumeration of operation codes sent as the first value of every request."""
    
    LOAD_TABLE_FROM_DB = 0      # Load a database table into the server
    CLUSTER_FROM_DB_TABLE = 1   # Cluster the loaded table with a radius
    STORE_CLUSTER_TO_FILE = 2   # Persist the last cluster set server-side
    CLUSTER_FROM_FILE = 3       # Load a stored cluster set from a server file


class ResponseStatus(str, Enum):
    """Status token opening every response."""
    
    OK = "OK"   # Success payload follows
    KO = "KO"   # One error message follows
