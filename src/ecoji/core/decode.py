"""Ecoji decoding: groups of 4 emoji back to 1-5 bytes.

Input produced by either version is accepted. Decoding starts with the
requested version and switches to the other one as soon as a character
belongs only to the other version.
"""
from __future__ import annotations

import io
import logging
from enum import Enum
from typing import BinaryIO, NamedTuple

from .alphabet import VERSION1, Alphabet
from .chars import iter_chars
from .errors import InvalidDataError, UnexpectedEofError

logger = logging.getLogger(__name__)

GROUP_SIZE = 4

# Symbol.padding for the generic padding; numbered paddings use 0-3
GENERIC_PADDING = -1


class Symbol(NamedTuple):
    """One decoded character: its 10-bit value and padding kind (None for data)."""
    bits: int
    padding: int | None


FILLER = Symbol(0, GENERIC_PADDING)


class DecoderState(Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"


class AlphabetSelector:
    """Tracks which version a single decode call is reading."""

    def __init__(self, primary: Alphabet):
        self.primary = primary
        self.state = DecoderState.PRIMARY

    @property
    def active(self) -> Alphabet:
        if self.state is DecoderState.PRIMARY:
            return self.primary
        return self.primary.sibling

    def read(self, c: str) -> Symbol:
        """Classify a character, switching versions if only the other one knows it."""
        alphabet = self.active
        if not alphabet.is_alphabet_symbol(c):
            other = alphabet.sibling
            if not other.is_alphabet_symbol(c):
                raise InvalidDataError(
                    f"Input character {c!r} (U+{ord(c):04X}) is not a part of the Ecoji alphabet"
                )
            logger.debug("Switching from version %d to version %d at %r",
                         alphabet.number, other.number, c)
            self.state = (DecoderState.FALLBACK if self.state is DecoderState.PRIMARY
                          else DecoderState.PRIMARY)
            alphabet = other

        if c == alphabet.padding:
            return Symbol(0, GENERIC_PADDING)
        numbered = alphabet.numbered_padding_index(c)
        if numbered is not None:
            return Symbol(0, numbered)
        return Symbol(alphabet.index_of(c), None)


def decode_group(group: list[Symbol]) -> bytes:
    """Rebuild the bytes of one complete 4-symbol group."""
    s0, s1, s2, s3 = group
    bits1, bits2, bits3 = s0.bits, s1.bits, s2.bits
    if s3.padding is not None and s3.padding != GENERIC_PADDING:
        bits4 = s3.padding << 8
    else:
        bits4 = s3.bits

    out = bytes((
        bits1 >> 2,
        (bits1 & 0x3) << 6 | bits2 >> 4,
        (bits2 & 0xF) << 4 | bits3 >> 6,
        (bits3 & 0x3F) << 2 | bits4 >> 8,
        bits4 & 0xFF,
    ))

    if s1.padding == GENERIC_PADDING:
        return out[:1]
    if s2.padding == GENERIC_PADDING:
        return out[:2]
    if s3.padding == GENERIC_PADDING:
        return out[:3]
    if s3.padding is not None:
        return out[:4]
    return out


def decode(source: BinaryIO, destination: BinaryIO, version: Alphabet = VERSION1) -> int:
    """Decode UTF-8 emoji text from source and write the bytes to destination.

    Returns the number of bytes written. Raises InvalidDataError for
    malformed UTF-8 or a character outside both alphabets, and
    UnexpectedEofError when the input stops inside a group that was not
    terminated by padding. Output decoded before an error stays written.
    """
    chars = iter_chars(source)
    selector = AlphabetSelector(version)
    written = 0

    for c in chars:
        group = [selector.read(c)]
        while len(group) < GROUP_SIZE:
            c = next(chars, None)
            if c is None:
                if len(group) == 1 or group[-1].padding is None:
                    raise UnexpectedEofError(
                        "Unexpected end of data, input code points count is not a multiple of 4"
                    )
                group.extend([FILLER] * (GROUP_SIZE - len(group)))
                break
            group.append(selector.read(c))

        out = decode_group(group)
        destination.write(out)
        written += len(out)

    logger.debug("Decoded starting from version %d, ended on version %d: %d bytes written",
                 version.number, selector.active.number, written)
    return written


def _as_source(data) -> BinaryIO:
    if isinstance(data, str):
        return io.BytesIO(data.encode("utf-8"))
    if isinstance(data, (bytes, bytearray, memoryview)):
        return io.BytesIO(data)
    return data


def decode_to_bytes(data, version: Alphabet = VERSION1) -> bytes:
    """Decode emoji text (str, UTF-8 bytes or a binary stream) to bytes."""
    output = io.BytesIO()
    decode(_as_source(data), output, version)
    return output.getvalue()


def decode_to_string(data, version: Alphabet = VERSION1) -> str:
    """Decode emoji text to a string; the decoded bytes must be UTF-8."""
    raw = decode_to_bytes(data, version)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidDataError(f"Decoded data is not valid UTF-8: {e.reason}") from e
