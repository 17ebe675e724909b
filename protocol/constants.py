"""Protocol constants for value framing.

These are protocol-level constants that must not be changed
without updating both client and server implementations.
"""

import struct

# Type tag formats: a single ASCII byte precedes every value body
TAG_FORMAT = '>c'
TAG_SIZE = struct.calcsize(TAG_FORMAT)

TAG_INT = b'I'
TAG_FLOAT = b'D'
TAG_TEXT = b'S'

# Integer body: big-endian signed 64-bit
INT_FORMAT = '>q'
INT_SIZE = struct.calcsize(INT_FORMAT)

# Float body: big-endian IEEE-754 double
FLOAT_FORMAT = '>d'
FLOAT_SIZE = struct.calcsize(FLOAT_FORMAT)

# Text body: big-endian unsigned 32-bit byte length, then UTF-8 bytes
LENGTH_FORMAT = '>I'
LENGTH_SIZE = struct.calcsize(LENGTH_FORMAT)

# Maximum encoded text size in bytes
# A larger declared length means the stream is desynchronized
MAX_TEXT_LENGTH = 16 * 1024 * 1024

TEXT_ENCODING = 'utf-8'
