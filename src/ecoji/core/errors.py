"""Error types raised by the Ecoji codec.

I/O failures from the source or destination are not wrapped: the
OSError raised by the stream propagates unchanged.
"""


class EcojiError(Exception):
    """Base class for encoding and decoding errors."""


class InvalidDataError(EcojiError, ValueError):
    """Input is not valid UTF-8 or contains a character outside both alphabets."""


class UnexpectedEofError(EcojiError, EOFError):
    """Input ended in the middle of a group without a padding terminator."""
