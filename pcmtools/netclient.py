"""Simple TCP and UDP clients that move raw bytes between streams and a server."""

from __future__ import annotations

import socket
import sys
from collections.abc import Iterator
from typing import BinaryIO

from pcmtools.synth import _atoi

CHUNK = 1024


def _address(host: str, port: int) -> tuple[str, int]:
    """Validate a dotted IPv4 address and return a socket address tuple."""
    try:
        packed = socket.inet_aton(host)
    except (OSError, ValueError):
        raise ValueError("Invalid IP address") from None
    return socket.inet_ntoa(packed), port & 0xFFFF


def _connect(host: str, port: int) -> socket.socket:
    address = _address(host, port)
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect(address)
    except OSError:
        sock.close()
        raise
    return sock


def _chunks(stream: BinaryIO, size: int) -> Iterator[bytes]:
    """Yield whatever the stream has ready, up to size bytes at a time."""
    read = getattr(stream, "read1", stream.read)
    return iter(lambda: read(size), b"")


def _drain(sock: socket.socket, out: BinaryIO) -> int:
    total = 0
    while data := sock.recv(CHUNK):
        out.write(data)
        total += len(data)
    return total


def receive_all(host: str, port: int, out: BinaryIO) -> int:
    """Connect over TCP and copy everything the server sends to out."""
    with _connect(host, port) as sock:
        return _drain(sock, out)


def send_then_receive(host: str, port: int, instream: BinaryIO, out: BinaryIO) -> int:
    """Send instream over TCP, half-close, then copy the reply to out.

    Returns the number of bytes received.
    """
    with _connect(host, port) as sock:
        for chunk in _chunks(instream, CHUNK):
            sock.sendall(chunk)
        sock.shutdown(socket.SHUT_WR)
        return _drain(sock, out)


def udp_send_then_receive(
    host: str, port: int, instream: BinaryIO, out: BinaryIO
) -> int:
    """Send instream as UDP datagrams, then copy replies to out until an empty one.

    Returns the number of bytes received.
    """
    address = _address(host, port)
    total = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        for chunk in _chunks(instream, CHUNK):
            sock.sendto(chunk, address)
        while True:
            data, _ = sock.recvfrom(CHUNK)
            if not data:
                break
            out.write(data)
            total += len(data)
    return total


_USAGE = "Usage: netclient {recv|send|udp} <IP> <Port>"


def main(argv: list[str] | None = None) -> int:
    """Run the recv, send or udp client against the given address."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3 or args[0] not in ("recv", "send", "udp"):
        print(_USAGE)
        return 1
    mode, host, port_text = args
    port = _atoi(port_text)
    out = sys.stdout.buffer
    try:
        if mode == "recv":
            receive_all(host, port, out)
        elif mode == "send":
            send_then_receive(host, port, sys.stdin.buffer, out)
        else:
            udp_send_then_receive(host, port, sys.stdin.buffer, out)
    except ValueError as exc:
        print(exc)
        return 1
    except OSError as exc:
        print(f"{mode}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())