"""Generate signed 16-bit PCM tones: a plain sine wave and a rising scale."""

from __future__ import annotations

import math
import re
import struct
import sys
from collections.abc import Iterable, Iterator

from pcmtools.vector import _atof

SAMPLE_RATE = 44100
SCALE_START = 261.63
SEMITONE = 1.059463
NOTE_SECONDS = 0.3
_WHOLE_STEPS = frozenset({0, 1, 3, 4, 5})

_SHORT_MIN = -32768
_SHORT_MAX = 32767
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _as_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_short(value: float) -> int:
    """Truncate toward zero and keep the result inside the 16-bit range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _SHORT_MAX if value > 0 else _SHORT_MIN
    return max(_SHORT_MIN, min(_SHORT_MAX, int(value)))


def _sample(volume: float, frequency: float, index: int, sample_rate: int) -> int:
    amplitude = volume * math.sin(2 * math.pi * frequency * index / sample_rate)
    return _to_short(_as_float32(amplitude))


def sine_samples(
    volume: float, frequency: float, count: float, sample_rate: int = SAMPLE_RATE
) -> Iterator[int]:
    """Yield samples of a sine wave; a fractional count is rounded up."""
    total = max(0, math.ceil(count))
    for index in range(total):
        yield _sample(volume, frequency, index, sample_rate)


def doremi_samples(
    volume: float, times: int, sample_rate: int = SAMPLE_RATE
) -> Iterator[int]:
    """Yield a major scale of the given number of notes, starting at middle C."""
    note_length = int(sample_rate * NOTE_SECONDS)
    frequency = SCALE_START
    for note in range(times):
        for index in range(note_length):
            yield _sample(volume, frequency, index, sample_rate)
        frequency *= SEMITONE
        if note % 7 in _WHOLE_STEPS:
            frequency *= SEMITONE


def to_pcm(samples: Iterable[int]) -> bytes:
    """Pack samples as signed 16-bit little-endian PCM."""
    values = list(samples)
    return struct.pack(f"<{len(values)}h", *values)


_USAGE = (
    "Usage: synth sine volume frequency duration\n"
    "       synth doremi volume[double] times[int]"
)


def main(argv: list[str] | None = None) -> int:
    """Write a sine tone or a scale to standard output as raw PCM."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 4 and args[0] == "sine":
        samples = sine_samples(_atof(args[1]), _atof(args[2]), _atof(args[3]))
    elif len(args) == 3 and args[0] == "doremi":
        samples = doremi_samples(_atof(args[1]), _atoi(args[2]))
    else:
        print(_USAGE)
        return 1
    try:
        sys.stdout.buffer.write(to_pcm(samples))
        sys.stdout.buffer.flush()
    except OSError:
        print("write error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())