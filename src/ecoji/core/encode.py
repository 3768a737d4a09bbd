"""Ecoji encoding: 5 input bytes become 4 emoji.

The 40 bits of a chunk are split big-endian into four 10-bit alphabet
indices. A short final chunk is completed with padding emoji:

    1 byte   s0 P  P  P
    2 bytes  s0 s1 P  P
    3 bytes  s0 s1 s2 P
    4 bytes  s0 s1 s2 Pn    (Pn = numbered padding for byte3 & 0x03)
    5 bytes  s0 s1 s2 s3

Version 2 stops a group at its first padding symbol.
"""
from __future__ import annotations

import io
import logging
from typing import BinaryIO

from .alphabet import VERSION1, Alphabet

logger = logging.getLogger(__name__)

CHUNK_SIZE = 5


def encode_chunk(chunk: bytes, version: Alphabet = VERSION1) -> str:
    """Encode 1-5 bytes as one group of emoji."""
    n = len(chunk)
    if not 1 <= n <= CHUNK_SIZE:
        raise ValueError(f"Chunk must be 1-{CHUNK_SIZE} bytes, got {n}")

    b0, b1, b2, b3, b4 = bytes(chunk).ljust(CHUNK_SIZE, b"\x00")
    symbols = version.symbols

    group = [symbols[b0 << 2 | b1 >> 6], version.padding, version.padding, version.padding]
    if n >= 2:
        group[1] = symbols[(b1 & 0x3F) << 4 | b2 >> 4]
    if n >= 3:
        group[2] = symbols[(b2 & 0x0F) << 6 | b3 >> 2]
    if n == 4:
        group[3] = version.padding4[b3 & 0x03]
    elif n == 5:
        group[3] = symbols[(b3 & 0x03) << 8 | b4]

    if version.number == 2:
        for i, c in enumerate(group):
            if version.is_padding(c):
                return "".join(group[:i + 1])
    return "".join(group)


def _read_chunk(source: BinaryIO) -> bytes:
    """Read up to CHUNK_SIZE bytes, retrying short reads until EOF."""
    buf = b""
    while len(buf) < CHUNK_SIZE:
        data = source.read(CHUNK_SIZE - len(buf))
        if not data:
            break
        buf += data
    return buf


def encode(source: BinaryIO, destination: BinaryIO, version: Alphabet = VERSION1) -> int:
    """Encode the whole source and write the UTF-8 emoji text to destination.

    Returns the number of bytes written. Errors from the source or the
    destination propagate as they are; whatever was written before the
    failure stays in the destination.
    """
    written = 0
    while True:
        chunk = _read_chunk(source)
        if not chunk:
            break
        out = encode_chunk(chunk, version).encode("utf-8")
        destination.write(out)
        written += len(out)

    logger.debug("Encoded with version %d: %d bytes written", version.number, written)
    return written


def encode_to_string(data, version: Alphabet = VERSION1) -> str:
    """Encode bytes (or a binary stream) and return the emoji text."""
    source = io.BytesIO(data) if isinstance(data, (bytes, bytearray, memoryview)) else data
    output = io.BytesIO()
    encode(source, output, version)
    return output.getvalue().decode("utf-8")
