"""Block FFT band-pass filter for signed 16-bit PCM streams."""

from __future__ import annotations

import cmath
import math
import re
import struct
import sys
from collections.abc import Iterator, Sequence
from typing import BinaryIO, TextIO

SAMPLE_RATE = 44100
SPECTRUM_FILE = "fft.dat"
SEPARATOR = "----------------"

_SHORT_MIN = -32768
_SHORT_MAX = 32767
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def is_power_of_two(n: int) -> bool:
    """Return True when n is a positive power of two (including 1)."""
    return n >= 1 and n & (n - 1) == 0


def _fft_r(x: Sequence[complex], w: complex) -> list[complex]:
    n = len(x)
    if n == 1:
        return [x[0]]
    half = n // 2
    even: list[complex] = []
    odd: list[complex] = []
    twiddle = 1 + 0j
    for a, b in zip(x[:half], x[half:]):
        even.append(a + b)
        odd.append(twiddle * (a - b))
        twiddle *= w
    even = _fft_r(even, w * w)
    odd = _fft_r(odd, w * w)
    return [value for pair in zip(even, odd) for value in pair]


def _check_length(n: int) -> None:
    if not is_power_of_two(n):
        raise ValueError(f"length {n} is not a power of two")


def fft(samples: Sequence[complex]) -> list[complex]:
    """Forward transform, scaled by 1/n; the length must be a power of two."""
    n = len(samples)
    _check_length(n)
    arg = 2.0 * math.pi / n
    w = complex(math.cos(arg), -math.sin(arg))
    return [value / n for value in _fft_r([complex(s) for s in samples], w)]


def ifft(spectrum: Sequence[complex]) -> list[complex]:
    """Inverse transform without scaling; the length must be a power of two."""
    n = len(spectrum)
    _check_length(n)
    arg = 2.0 * math.pi / n
    w = complex(math.cos(arg), math.sin(arg))
    return _fft_r([complex(s) for s in spectrum], w)


def bandpass(
    spectrum: Sequence[complex], low: int, high: int, sample_rate: int = SAMPLE_RATE
) -> list[complex]:
    """Return spectrum with bins outside [low, high] Hz set to zero."""
    n = len(spectrum)
    result = []
    for index, value in enumerate(spectrum):
        freq = index * sample_rate // n
        if freq >= sample_rate // 2:
            freq -= sample_rate
        result.append(0j if abs(freq) < low or abs(freq) > high else value)
    return result


def format_spectrum(spectrum: Sequence[complex]) -> Iterator[str]:
    """Yield "index real imag magnitude phase" for every bin."""
    for index, value in enumerate(spectrum):
        yield (
            f"{index} {value.real:f} {value.imag:f} "
            f"{abs(value):f} {cmath.phase(value):f}"
        )


def _to_short(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _SHORT_MAX if value > 0 else _SHORT_MIN
    return max(_SHORT_MIN, min(_SHORT_MAX, int(value)))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def filter_stream(
    instream: BinaryIO,
    outstream: BinaryIO,
    n: int,
    low: int,
    high: int,
    spectrum_out: TextIO | None = None,
) -> int:
    """Band-pass filter PCM from instream to outstream in blocks of n samples.

    A short final block is padded with silence for the transform, but only
    as many bytes as were read are written. Returns the bytes processed.
    """
    _check_length(n)
    block_size = n * 2
    total = 0
    while True:
        block = _read_exact(instream, block_size)
        if not block:
            break
        padded = block.ljust(block_size, b"\x00")
        samples = struct.unpack(f"<{n}h", padded)
        spectrum = bandpass(fft(samples), low, high)
        if spectrum_out is not None:
            for line in format_spectrum(spectrum):
                spectrum_out.write(line + "\n")
            spectrum_out.write(SEPARATOR + "\n")
        restored = [_to_short(value.real) for value in ifft(spectrum)]
        outstream.write(struct.pack(f"<{n}h", *restored)[: len(block)])
        total += len(block)
    return total


def _atol(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Filter standard input to standard output, logging spectra to fft.dat."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("usage: fft n low high", file=sys.stderr)
        return 1
    n, low, high = (_atol(arg) for arg in args)
    if not is_power_of_two(n):
        print(f"error : n ({n}) not a power of two", file=sys.stderr)
        return 1
    try:
        with open(SPECTRUM_FILE, "w", encoding="ascii") as spectrum_out:
            filter_stream(
                sys.stdin.buffer, sys.stdout.buffer, n, low, high, spectrum_out
            )
            sys.stdout.buffer.flush()
    except OSError as exc:
        print(f"fopen: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())