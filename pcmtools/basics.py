"""Small file and number utilities: copy, reverse, multiply, trig identity."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterator
from functools import partial
from os import PathLike
from pathlib import Path
from typing import BinaryIO

_STRICT_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan(?:\([0-9a-z_]*\))?))",
    re.IGNORECASE,
)


def _parse_whole_float(text: str) -> float | None:
    """Parse text as a complete real number; None if invalid or out of range."""
    match = _STRICT_FLOAT.fullmatch(text)
    if not match:
        return None
    token = match.group(1)
    body = token.lower().lstrip("+-")
    if body.startswith("nan"):
        return math.nan
    if body.startswith("inf"):
        return -math.inf if token.startswith("-") else math.inf
    if body.startswith("0x"):
        try:
            value = float.fromhex(token)
        except OverflowError:
            return None
        mantissa = body[2:].split("p")[0]
    else:
        value = float(token)
        mantissa = body.split("e")[0]
    if math.isinf(value):
        return None
    if value == 0.0 and any(ch not in "0." for ch in mantissa):
        return None
    return value


def copy_file(path: str | PathLike, out: BinaryIO, chunk_size: int = 100) -> int:
    """Copy the bytes of the file at path to out; return how many were copied."""
    total = 0
    with open(path, "rb") as source:
        for chunk in iter(partial(source.read, chunk_size), b""):
            out.write(chunk)
            total += len(chunk)
    return total


def trig_identity_lines(count: int = 100) -> Iterator[str]:
    """Yield cos^2(t)+sin^2(t) for t = 0 .. count-1, one formatted line each."""
    for t in range(count):
        c, s = math.cos(t), math.sin(t)
        yield f"cos^2({t})+sin^2({t}) = {c * c + s * s:f}"


def format_product(x: str, y: str) -> str:
    """Return x * y formatted with six decimals, or 0.000000 if either is invalid."""
    a = _parse_whole_float(x)
    if a is None:
        return f"{0.0:f}"
    b = _parse_whole_float(y)
    if b is None:
        return f"{0.0:f}"
    return f"{a * b:f}"


def reverse_file(path: str | PathLike) -> bytes:
    """Return the contents of the file at path in reverse byte order."""
    return Path(path).read_bytes()[::-1]


_USAGE = (
    "Usage: basics cat PATH\n"
    "       basics trig\n"
    "       basics product X Y\n"
    "       basics reverse FILE"
)


def main(argv: list[str] | None = None) -> int:
    """Run one of the cat, trig, product or reverse commands."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE, file=sys.stderr)
        return 1
    command, rest = args[0], args[1:]

    if command == "cat" and len(rest) == 1:
        try:
            copy_file(rest[0], sys.stdout.buffer)
        except OSError:
            print(f"Cannot open file: {rest[0]}", file=sys.stderr)
            return 1
        sys.stdout.buffer.flush()
        return 0
    if command == "trig" and not rest:
        for line in trig_identity_lines():
            print(line)
        return 0
    if command == "product" and len(rest) == 2:
        print(format_product(rest[0], rest[1]))
        return 0
    if command == "reverse" and len(rest) == 1:
        try:
            data = reverse_file(rest[0])
        except OSError:
            print(f"Cannot open file: {rest[0]}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return 0

    print(_USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())