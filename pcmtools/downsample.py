"""Keep every n-th 16-bit sample of a PCM stream."""

from __future__ import annotations

import re
import sys
from typing import BinaryIO

_CHUNK = 4096
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _check_rate(rate: int) -> int:
    if rate == 0:
        raise ValueError("downsample rate must not be zero")
    return abs(rate)


def downsample(data: bytes, rate: int) -> bytes:
    """Return every rate-th two-byte sample of data; a trailing odd byte is dropped."""
    step = _check_rate(rate)
    usable = len(data) - len(data) % 2
    return memoryview(data[:usable]).cast("H")[::step].tobytes()


def downsample_stream(instream: BinaryIO, outstream: BinaryIO, rate: int) -> int:
    """Downsample instream into outstream; return how many samples were written."""
    step = _check_rate(rate)
    carry = b""
    position = 0
    written = 0
    for chunk in iter(lambda: instream.read(_CHUNK), b""):
        data = carry + chunk
        usable = len(data) - len(data) % 2
        frames = memoryview(data[:usable]).cast("H")
        kept = frames[(-position) % step::step]
        outstream.write(kept.tobytes())
        written += len(kept)
        position += len(frames)
        carry = data[usable:]
    return written


def main(argv: list[str] | None = None) -> int:
    """Downsample standard input to standard output by the given rate."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: downsample <downsample_rate>", file=sys.stderr)
        return 1
    match = _INT_PREFIX.match(args[0])
    rate = int(match.group(1)) if match else 0
    try:
        downsample_stream(sys.stdin.buffer, sys.stdout.buffer, rate)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"write: {exc.strerror or exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())