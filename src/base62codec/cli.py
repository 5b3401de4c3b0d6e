"""Command-line base62 encoder and decoder.

Reads lines from files or stdin and encodes (or, with ``-D``, decodes) every
whitespace-separated token, keeping the whitespace between tokens as it was:

    $ echo "hi -1" | base62
    6X7 30B

Whitespace is the Unicode White_Space set (ASCII blanks, U+0085, U+00A0,
U+2000 to U+200A and the other Unicode spaces) matched on UTF-8 input. Bytes
that are not valid UTF-8 always belong to a token.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import TYPE_CHECKING, BinaryIO

from base62codec import __version__
from base62codec.base62 import Base62Error, Encoding, StdEncoding


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


logger = logging.getLogger(__name__)

_PROG = "base62"
_ALPHABET_LENGTH = 62
_SPACE_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(map(chr, range(0x2000, 0x200B)))
    + "\u2028\u2029\u202f\u205f\u3000"
)
# Runs of whitespace characters, matched by their UTF-8 encodings
_WHITESPACE = re.compile(
    b"((?:" + b"|".join(re.escape(c.encode()) for c in _SPACE_CHARS) + b")+)"
)


class TokenError(Exception):
    """Raised when one or more tokens of a line could not be converted."""


def process_line(line: bytes, convert: Callable[[bytes], bytes]) -> bytes:
    """Convert every token of a line, copying whitespace runs verbatim.

    All tokens are attempted even when one fails; failures are logged.

    Raises:
        TokenError: If any token failed to convert.
    """
    parts = _WHITESPACE.split(line)
    failed = 0
    # Odd indexes hold the whitespace runs, even ones the tokens
    for i in range(0, len(parts), 2):
        if not parts[i]:
            continue
        try:
            parts[i] = convert(parts[i])
        except Base62Error as e:
            logger.error("%s", e)
            failed += 1
    if failed:
        raise TokenError(f"{failed} token(s) failed to convert")
    return b"".join(parts)


def _split_lines(stream: BinaryIO) -> Iterator[bytes]:
    for line in stream:
        line = line.removesuffix(b"\n")
        yield line.removesuffix(b"\r")


def run_stream(
    stream: BinaryIO,
    out: BinaryIO,
    convert: Callable[[bytes], bytes],
) -> bool:
    """Convert every line of a stream, writing results to out.

    Lines with a failed token are skipped. Returns True when every line
    was converted.
    """
    ok = True
    for lineno, line in enumerate(_split_lines(stream), start=1):
        try:
            result = process_line(line, convert)
        except TokenError as e:
            logger.debug("line %d skipped: %s", lineno, e)
            ok = False
            continue
        out.write(result)
        out.write(b"\n")
    return ok


def make_converter(encoding: Encoding, *, decode: bool) -> Callable[[bytes], bytes]:
    """Return the per-token conversion function for the selected mode."""
    if decode:
        return encoding.decode_strict

    def _encode(token: bytes) -> bytes:
        return encoding.encode(token).encode("latin-1")

    return _encode


def _alphabet(value: str) -> Encoding:
    if len(value) != _ALPHABET_LENGTH:
        raise argparse.ArgumentTypeError(
            f"alphabet must have {_ALPHABET_LENGTH} characters, got {len(value)}"
        )
    if len(set(value)) != _ALPHABET_LENGTH:
        raise argparse.ArgumentTypeError("alphabet characters must be distinct")
    if not value.isascii() or not value.isprintable() or any(c.isspace() for c in value):
        raise argparse.ArgumentTypeError("alphabet must be printable ASCII without whitespace")
    return Encoding(value)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="Encode or decode whitespace-separated tokens with base62.",
    )
    parser.add_argument("-D", "--decode", action="store_true", help="decodes input")
    parser.add_argument(
        "-i",
        "--input",
        action="append",
        default=[],
        metavar="FILE",
        help="input file (repeatable, '-' for stdin)",
    )
    parser.add_argument("-o", "--output", default="-", metavar="FILE", help="output file")
    parser.add_argument(
        "-a",
        "--alphabet",
        type=_alphabet,
        default=StdEncoding,
        help="62 distinct ASCII characters in digit order",
    )
    parser.add_argument("--verbose", action="store_true", help="log skipped lines")
    parser.add_argument(
        "-v", "--version", action="version", version=f"{_PROG} {__version__}"
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="input files")
    return parser


def _run_inputs(names: list[str], out: BinaryIO, convert: Callable[[bytes], bytes]) -> bool:
    if not names:
        return run_stream(sys.stdin.buffer, out, convert)
    ok = True
    for name in names:
        try:
            with open(name, "rb") as stream:  # noqa: PTH123
                ok = run_stream(stream, out, convert) and ok
        except OSError as e:
            logger.error("%s", e)
            ok = False
    return ok


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        format=f"{_PROG}: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )
    convert = make_converter(args.alphabet, decode=args.decode)
    names = [name for name in [*args.input, *args.files] if name not in ("", "-")]

    if args.output == "-":
        ok = _run_inputs(names, sys.stdout.buffer, convert)
        sys.stdout.buffer.flush()
    else:
        try:
            with open(args.output, "wb") as out:  # noqa: PTH123
                ok = _run_inputs(names, out, convert)
        except OSError as e:
            logger.error("%s", e)
            return 1
    return 0 if ok else 1


__all__ = ["TokenError", "build_parser", "main", "make_converter", "process_line", "run_stream"]
