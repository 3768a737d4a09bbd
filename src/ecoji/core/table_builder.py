"""Generate the Ecoji alphabet tables from Unicode emoji-test.txt.

Usage:
    python -m ecoji.core.table_builder [--source PATH_OR_URL] [--output PATH]

Version 1 is the first 1024 single-code-point emoji at or above U+1F004
(Emoji 11.0 and earlier), in code point order, minus its padding symbols.

Version 2 keeps every version 1 position except those holding an emoji
that is not fully-qualified on its own (text-default pictographs,
skin-tone and hair components, regional indicators). Those positions
are refilled in index order with the lowest unused fully-qualified emoji
up to Emoji 13.0.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

EMOJI_TEST_URL = "https://unicode.org/Public/emoji/15.1/emoji-test.txt"
DEFAULT_OUTPUT = Path(__file__).with_name("emojis.py")

ALPHABET_SIZE = 1024
FIRST_CODE_POINT = 0x1F004
V1_MAX_EMOJI_VERSION = (11, 0)
V2_MAX_EMOJI_VERSION = (13, 0)

PADDING = 0x2615
V1_PADDING_NUMBERED = (0x269C, 0x1F3CD, 0x1F4D1, 0x1F64B)
V2_PADDING_NUMBERED = (0x1F977, 0x1F6FC, 0x1F4D1, 0x1F64B)

FULLY_QUALIFIED = "fully-qualified"
REGIONAL_INDICATOR = "regional-indicator"
REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)

# 1F600 ; fully-qualified # 😀 E1.0 grinning face
LINE_RE = re.compile(r"^([0-9A-Fa-f ]+);\s*([\w-]+)\s*#.*?E(\d+)\.(\d+)")
FILE_VERSION_RE = re.compile(r"^#\s*Version:\s*(\S+)")


@dataclass(frozen=True)
class EmojiEntry:
    code_point: int
    status: str
    version: tuple[int, int]


@dataclass
class EmojiData:
    """Single-code-point emoji parsed from one emoji-test.txt file."""
    unicode_version: str
    entries: dict[int, EmojiEntry]


def parse_emoji_test(text: str) -> EmojiData:
    """Parse emoji-test.txt, keeping entries made of exactly one code point."""
    unicode_version = "unknown"
    entries = {}
    for line in text.splitlines():
        if line.startswith("#"):
            m = FILE_VERSION_RE.match(line)
            if m:
                unicode_version = m.group(1)
            continue
        m = LINE_RE.match(line)
        if not m:
            continue
        code_points = m.group(1).split()
        if len(code_points) != 1:
            continue
        cp = int(code_points[0], 16)
        entries[cp] = EmojiEntry(cp, m.group(2), (int(m.group(3)), int(m.group(4))))

    # Regional indicators only appear in flag sequences
    for cp in REGIONAL_INDICATORS:
        entries.setdefault(cp, EmojiEntry(cp, REGIONAL_INDICATOR, (0, 6)))

    return EmojiData(unicode_version, entries)


def build_version1(entries: dict[int, EmojiEntry], size: int = ALPHABET_SIZE) -> list[int]:
    """Select the version 1 alphabet in index order."""
    excluded = {PADDING, *V1_PADDING_NUMBERED}
    candidates = [
        cp for cp in sorted(entries)
        if cp >= FIRST_CODE_POINT
        and entries[cp].version <= V1_MAX_EMOJI_VERSION
        and cp not in excluded
    ]
    if len(candidates) < size:
        raise ValueError(f"Need {size} version 1 emoji, found {len(candidates)}")
    return candidates[:size]


def build_version2_substitutions(entries: dict[int, EmojiEntry],
                                 version1: list[int]) -> dict[int, int]:
    """Map version 1 positions holding problematic emoji to replacements."""
    used = set(version1) | {PADDING, *V1_PADDING_NUMBERED, *V2_PADDING_NUMBERED}
    replacements = iter([
        cp for cp in sorted(entries)
        if cp >= FIRST_CODE_POINT
        and entries[cp].status == FULLY_QUALIFIED
        and entries[cp].version <= V2_MAX_EMOJI_VERSION
        and cp not in used
    ])

    substitutions = {}
    for index, cp in enumerate(version1):
        if entries[cp].status == FULLY_QUALIFIED:
            continue
        replacement = next(replacements, None)
        if replacement is None:
            raise ValueError(f"Ran out of version 2 replacements at index {index}")
        substitutions[index] = replacement
    return substitutions


def _hex(cp: int) -> str:
    return f"0x{cp:X}"


def _render_rows(items: list[str], per_row: int, comment: bool) -> list[str]:
    rows = []
    for start in range(0, len(items), per_row):
        row = "    " + " ".join(items[start:start + per_row])
        if comment:
            row += f"  # {start}"
        rows.append(row)
    return rows


def render_module(version1: list[int], substitutions: dict[int, int],
                  unicode_version: str) -> str:
    """Render the emojis.py source for the given tables."""
    def paddings(numbered):
        return "(" + ", ".join(_hex(cp) for cp in numbered) + ")"

    lines = [
        '"""Emoji alphabet tables for both Ecoji versions.',
        "",
        "Generated by ``python -m ecoji.core.table_builder`` from the Unicode",
        f"emoji-test.txt data file (Emoji {unicode_version}). Do not edit by hand.",
        '"""',
        "",
        f"PADDING = {_hex(PADDING)}",
        "",
        f"V1_PADDING_NUMBERED = {paddings(V1_PADDING_NUMBERED)}",
        f"V2_PADDING_NUMBERED = {paddings(V2_PADDING_NUMBERED)}",
        "",
        "# Version 1 alphabet, index order",
        "V1_EMOJIS = (",
    ]
    lines += _render_rows([f"{_hex(cp)}," for cp in version1], 8, comment=True)
    lines += [
        ")",
        "",
        "# Version 2 replaces these version 1 positions, keeping every other index",
        "V2_SUBSTITUTIONS = {",
    ]
    lines += _render_rows(
        [f"{index}: {_hex(cp)}," for index, cp in sorted(substitutions.items())],
        6, comment=False,
    )
    lines.append("}")
    return "\n".join(lines) + "\n"


def fetch_emoji_test(url: str = EMOJI_TEST_URL) -> str:
    """Download emoji-test.txt."""
    logger.info("Fetching %s", url)
    response = requests.get(url, timeout=30)
    response.raise_for_status()
    return response.text


def load_source(source: str) -> str:
    if source.startswith(("http://", "https://")):
        return fetch_emoji_test(source)
    return Path(source).read_text(encoding="utf-8")


def build(text: str) -> str:
    """Build the emojis.py source from emoji-test.txt contents."""
    data = parse_emoji_test(text)
    version1 = build_version1(data.entries)
    substitutions = build_version2_substitutions(data.entries, version1)
    logger.info("Emoji %s: %d version 1 symbols, %d version 2 substitutions",
                data.unicode_version, len(version1), len(substitutions))
    return render_module(version1, substitutions, data.unicode_version)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ecoji-tables",
        description="Generate the Ecoji alphabet tables from Unicode emoji-test.txt",
    )
    parser.add_argument("--source", default=EMOJI_TEST_URL,
                        help="Path or URL of emoji-test.txt (default: unicode.org, Emoji 15.1)")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT,
                        help="Where to write the generated module")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        module = build(load_source(args.source))
    except (OSError, ValueError, requests.RequestException) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    args.output.write_text(module, encoding="utf-8")
    print(f"Written {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
