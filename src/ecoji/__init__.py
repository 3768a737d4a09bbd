"""Base-1024 encoding of binary data as emoji."""

__version__ = "1.0.0"

from .core.alphabet import VERSION1, VERSION2, VERSIONS, Alphabet, get_version
from .core.decode import decode, decode_to_bytes, decode_to_string
from .core.encode import encode, encode_to_string
from .core.errors import EcojiError, InvalidDataError, UnexpectedEofError

__all__ = [
    "Alphabet",
    "VERSION1",
    "VERSION2",
    "VERSIONS",
    "get_version",
    "encode",
    "encode_to_string",
    "decode",
    "decode_to_bytes",
    "decode_to_string",
    "EcojiError",
    "InvalidDataError",
    "UnexpectedEofError",
]
