"""Write small binary test files and list binary data as index/value lines."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

HITOSHI = bytes([228, 186, 186, 229, 191, 151])


def write_hitoshi(path: str | PathLike) -> None:
    """Write the UTF-8 bytes of a two-character name to path."""
    Path(path).write_bytes(HITOSHI)


def write_byte_ramp(path: str | PathLike) -> None:
    """Write every byte value from 0 to 255, in order, to path."""
    Path(path).write_bytes(bytes(range(256)))


def byte_listing(data: bytes) -> Iterator[str]:
    """Yield "index value" for each unsigned byte of data."""
    for index, value in enumerate(data):
        yield f"{index} {value}"


def short_listing(data: bytes) -> Iterator[str]:
    """Yield "index value" for each signed 16-bit little-endian sample.

    A trailing odd byte is ignored.
    """
    usable = len(data) - len(data) % 2
    for index, (value,) in enumerate(struct.iter_unpack("<h", data[:usable])):
        yield f"{index} {value}"


def _dump(source: str | PathLike, destination: str | PathLike, listing) -> int:
    data = Path(source).read_bytes()
    count = 0
    with open(destination, "w", encoding="ascii", newline="\n") as out:
        for line in listing(data):
            out.write(line + "\n")
            count += 1
    return count


def dump_bytes(source: str | PathLike, destination: str | PathLike) -> int:
    """Write the byte listing of source to destination; return the line count."""
    return _dump(source, destination, byte_listing)


def dump_shorts(source: str | PathLike, destination: str | PathLike) -> int:
    """Write the sample listing of source to destination; return the line count."""
    return _dump(source, destination, short_listing)


_USAGE = (
    "Usage: datafiles hitoshi FILE\n"
    "       datafiles ramp FILE\n"
    "       datafiles bytes INPUT OUTPUT\n"
    "       datafiles shorts INPUT OUTPUT"
)


def main(argv: list[str] | None = None) -> int:
    """Run one of the hitoshi, ramp, bytes or shorts commands."""
    args = sys.argv[1:] if argv is None else list(argv)
    writers = {"hitoshi": write_hitoshi, "ramp": write_byte_ramp}
    dumpers = {"bytes": dump_bytes, "shorts": dump_shorts}
    try:
        if len(args) == 2 and args[0] in writers:
            writers[args[0]](args[1])
            return 0
        if len(args) == 3 and args[0] in dumpers:
            dumpers[args[0]](args[1], args[2])
            return 0
    except OSError as exc:
        print(f"open: {exc.strerror or exc}", file=sys.stderr)
        return 1
    print(_USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())