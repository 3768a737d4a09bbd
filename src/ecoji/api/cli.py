"""
Command-line interface for Ecoji.

Encodes standard input as emoji (or decodes emoji back to bytes) and
writes the result to standard output.

Environment:
    ECOJI_VERSION   Alphabet version used when neither --v1 nor --v2 is given (default: 1)
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import ExitStack
from typing import BinaryIO

from .. import __version__
from ..core.alphabet import Alphabet, get_version
from ..core.decode import decode
from ..core.encode import encode
from ..core.errors import EcojiError

logger = logging.getLogger("ecoji")

VERSION_ENV_VAR = "ECOJI_VERSION"
DEFAULT_VERSION = "1"


def setup_logger(logger_name: str, level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the named logger once and set its level."""
    log = logging.getLogger(logger_name)
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)

    return log


def resolve_version(args: argparse.Namespace) -> Alphabet:
    """Pick the alphabet from --v1/--v2, falling back to ECOJI_VERSION."""
    if args.v2:
        return get_version(2)
    if args.v1:
        return get_version(1)

    raw = os.environ.get(VERSION_ENV_VAR, DEFAULT_VERSION).strip()
    try:
        number = int(raw)
    except ValueError:
        raise ValueError(f"{VERSION_ENV_VAR} must be 1 or 2, got {raw!r}") from None
    return get_version(number)


def _open_input(path: str, stack: ExitStack) -> BinaryIO:
    if path == "-":
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def _open_output(path: str, stack: ExitStack) -> BinaryIO:
    if path == "-":
        return sys.stdout.buffer
    return stack.enter_context(open(path, "wb"))


def cmd_encode(args: argparse.Namespace, version: Alphabet) -> int:
    """Encode input bytes as emoji."""
    with ExitStack() as stack:
        source = _open_input(args.input, stack)
        destination = _open_output(args.output, stack)
        written = encode(source, destination, version)
        destination.flush()
    logger.info("Encoded with version %d: %d bytes written", version.number, written)
    return 0


def cmd_decode(args: argparse.Namespace, version: Alphabet) -> int:
    """Decode emoji input back to bytes."""
    with ExitStack() as stack:
        source = _open_input(args.input, stack)
        destination = _open_output(args.output, stack)
        written = decode(source, destination, version)
        destination.flush()
    logger.info("Decoded: %d bytes written", written)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ecoji",
        description=(
            "Encode or decode data in standard input as emojis and print "
            "results to standard output."
        ),
    )
    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode data",
    )

    versions = parser.add_mutually_exclusive_group()
    versions.add_argument("--v1", action="store_true", help="Use version 1 (default)")
    versions.add_argument("--v2", action="store_true", help="Use version 2")

    parser.add_argument(
        "-i", "--input",
        default="-",
        help="Read from this file instead of standard input",
    )
    parser.add_argument(
        "-o", "--output",
        default="-",
        help="Write to this file instead of standard output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on standard error",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logger("ecoji", logging.DEBUG if args.verbose else logging.WARNING)

    try:
        version = resolve_version(args)
        if args.decode:
            return cmd_decode(args, version)
        return cmd_encode(args, version)
    except (EcojiError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
