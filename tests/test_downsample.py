import io
import struct
import sys

import pytest

from pcmtools.downsample import downsample, downsample_stream, main


def _pcm(values):
    return struct.pack(f"<{len(values)}h", *values)


def test_every_second_sample():
    assert downsample(_pcm([0, 1, 2, 3, 4, 5]), 2) == _pcm([0, 2, 4])


def test_rate_one_is_identity():
    data = _pcm([9, -9, 300])
    assert downsample(data, 1) == data


def test_trailing_odd_byte_dropped():
    assert downsample(_pcm([1, 2, 3]) + b"\x07", 1) == _pcm([1, 2, 3])


def test_zero_rate_rejected():
    with pytest.raises(ValueError):
        downsample(_pcm([1, 2]), 0)


class _Trickle(io.RawIOBase):
    """A stream that hands out at most three bytes per read."""

    def __init__(self, data):
        self._source = io.BytesIO(data)

    def read(self, size=-1):
        return self._source.read(min(3, size) if size and size > 0 else 3)


@pytest.mark.parametrize("rate", [1, 2, 3, 5])
def test_stream_matches_whole_buffer(rate):
    data = _pcm(list(range(-20, 20)))
    out = io.BytesIO()
    written = downsample_stream(_Trickle(data), out, rate)
    assert out.getvalue() == downsample(data, rate)
    assert written == len(out.getvalue()) // 2


def test_main_reads_stdin(monkeypatch, capsysbinary):
    data = _pcm([10, 11, 12, 13, 14, 15, 16])
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    assert main(["3"]) == 0
    assert capsysbinary.readouterr().out == downsample(data, 3)


def test_main_rejects_zero_rate(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(_pcm([1]))))
    assert main(["zero"]) == 1
    assert main([]) == 1