"""Lazy UTF-8 character reader over a binary stream."""
from __future__ import annotations

import codecs
from typing import BinaryIO, Iterator

from .errors import InvalidDataError

DEFAULT_CHUNK_SIZE = 8192


def iter_chars(source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the characters of a UTF-8 byte stream one at a time.

    Multi-byte sequences split across reads are reassembled. Malformed
    input, or a stream that ends inside a sequence, raises InvalidDataError.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    while True:
        data = source.read(chunk_size)
        final = not data
        try:
            text = decoder.decode(data, final=final)
        except UnicodeDecodeError as e:
            raise InvalidDataError(f"Input is not valid UTF-8: {e.reason}") from e
        yield from text
        if final:
            return
