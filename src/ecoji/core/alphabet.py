"""Emoji alphabets for Ecoji versions 1 and 2.

Each version maps 1024 emoji to the 10-bit values 0-1023 and reserves
five padding emoji: one generic padding shared by both versions and four
numbered paddings that carry the two residual bits of a 4-byte chunk.

Version 2 keeps the version 1 alphabet except at the positions listed in
``V2_SUBSTITUTIONS``, so a symbol present in both versions always has the
same index in both.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .emojis import (
    PADDING,
    V1_EMOJIS,
    V1_PADDING_NUMBERED,
    V2_PADDING_NUMBERED,
    V2_SUBSTITUTIONS,
)

ALPHABET_SIZE = 1024


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Immutable symbol table for one Ecoji version."""

    number: int
    symbols: tuple[str, ...]
    reverse: Mapping[str, int]
    padding: str
    padding4: tuple[str, str, str, str]

    def __post_init__(self) -> None:
        if len(self.symbols) != ALPHABET_SIZE:
            raise ValueError(
                f"Version {self.number} needs {ALPHABET_SIZE} symbols, got {len(self.symbols)}"
            )
        if len(self.reverse) != ALPHABET_SIZE:
            raise ValueError(f"Version {self.number} has duplicate symbols")
        for i, c in enumerate(self.symbols):
            if self.reverse.get(c) != i:
                raise ValueError(f"Version {self.number} reverse table disagrees at index {i}")
        paddings = {self.padding, *self.padding4}
        if len(paddings) != 5:
            raise ValueError(f"Version {self.number} padding symbols are not distinct")
        clashes = paddings.intersection(self.reverse)
        if clashes:
            raise ValueError(
                f"Version {self.number} padding overlaps alphabet: {sorted(clashes)!r}"
            )

    @classmethod
    def from_code_points(cls, number: int, code_points, padding: int,
                         padding4) -> Alphabet:
        """Build an alphabet from integer code points."""
        symbols = tuple(chr(cp) for cp in code_points)
        reverse = MappingProxyType({c: i for i, c in enumerate(symbols)})
        return cls(number, symbols, reverse, chr(padding),
                   tuple(chr(cp) for cp in padding4))

    @property
    def sibling(self) -> Alphabet:
        """The other Ecoji version."""
        return get_version(2 if self.number == 1 else 1)

    def is_padding(self, c: str) -> bool:
        return c == self.padding or c in self.padding4

    def is_alphabet_symbol(self, c: str) -> bool:
        return c in self.reverse or self.is_padding(c)

    def index_of(self, c: str) -> int | None:
        """Return the 10-bit value of a real symbol, None for anything else."""
        return self.reverse.get(c)

    def numbered_padding_index(self, c: str) -> int | None:
        """Return 0-3 for a numbered padding symbol, None otherwise."""
        try:
            return self.padding4.index(c)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"Alphabet(version={self.number})"


def _version2_code_points() -> list[int]:
    code_points = list(V1_EMOJIS)
    for index, cp in V2_SUBSTITUTIONS.items():
        code_points[index] = cp
    return code_points


VERSION1 = Alphabet.from_code_points(1, V1_EMOJIS, PADDING, V1_PADDING_NUMBERED)
VERSION2 = Alphabet.from_code_points(2, _version2_code_points(), PADDING, V2_PADDING_NUMBERED)
VERSIONS = (VERSION1, VERSION2)


def get_version(number: int) -> Alphabet:
    """Return the alphabet for version 1 or 2."""
    if number == 1:
        return VERSION1
    if number == 2:
        return VERSION2
    raise ValueError(f"Unknown Ecoji version: {number!r} (expected 1 or 2)")
