"""Stream raw audio over TCP: one-way senders and a two-way phone."""

from __future__ import annotations

import socket
import subprocess
import sys
from typing import BinaryIO

from pcmtools.netclient import _chunks, _connect
from pcmtools.synth import _atoi

RECORD_COMMAND = "rec -t raw -b 16 -c 1 -e s -r 44100 -"
PHONE_CHUNK = 4096
SEND_CHUNK = 1024
BACKLOG = 10

_PHONE_USAGE = "Usage: phone <server_ip> <port>\nor\nUsage: phone <port>"
_USAGE = (
    "Usage: phone phone <server_ip> <port>\n"
    "       phone phone <port>\n"
    "       phone send <port>\n"
    "       phone send-rec <port>"
)


def open_recorder(command: str = RECORD_COMMAND) -> subprocess.Popen:
    """Start the recording command through the shell with its output piped."""
    return subprocess.Popen(command, shell=True, stdout=subprocess.PIPE)


def _listen(port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind(("", port & 0xFFFF))
        sock.listen(BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def serve_stream(listener: socket.socket, source: BinaryIO) -> int:
    """Accept one connection and send it all of source; return bytes sent."""
    conn, _ = listener.accept()
    total = 0
    with conn:
        for chunk in _chunks(source, SEND_CHUNK):
            conn.sendall(chunk)
            total += len(chunk)
    return total


def phone_server_session(conn: socket.socket, source: BinaryIO, out: BinaryIO) -> None:
    """Answer each block received with a block from source, until either ends."""
    while data := conn.recv(PHONE_CHUNK):
        out.write(data)
        out.flush()
        chunk = source.read(PHONE_CHUNK)
        if not chunk:
            break
        conn.sendall(chunk)


def phone_client_session(conn: socket.socket, source: BinaryIO, out: BinaryIO) -> None:
    """Send a block from source, then play the block received, until either ends."""
    while chunk := source.read(PHONE_CHUNK):
        conn.sendall(chunk)
        data = conn.recv(PHONE_CHUNK)
        if not data:
            break
        out.write(data)
        out.flush()


def run_phone(argv: list[str]) -> int:
    """Run the phone as server (one argument: port) or client (address and port)."""
    args = list(argv)
    out = sys.stdout.buffer
    if len(args) == 1:
        with _listen(_atoi(args[0])) as listener:
            conn, _ = listener.accept()
            with conn, open_recorder() as recorder:
                phone_server_session(conn, recorder.stdout, out)
        return 0
    if len(args) == 2:
        with _connect(args[0], _atoi(args[1])) as conn:
            with open_recorder() as recorder:
                phone_client_session(conn, recorder.stdout, out)
        return 0
    raise ValueError(_PHONE_USAGE)


def main(argv: list[str] | None = None) -> int:
    """Run the phone, or send standard input or the recorder to one client."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) == 2 and args[0] == "send":
            with _listen(_atoi(args[1])) as listener:
                serve_stream(listener, sys.stdin.buffer)
            return 0
        if len(args) == 2 and args[0] == "send-rec":
            with _listen(_atoi(args[1])) as listener:
                with open_recorder() as recorder:
                    serve_stream(listener, recorder.stdout)
            return 0
        if args and args[0] == "phone":
            return run_phone(args[1:])
    except ValueError as exc:
        print(exc)
        return 1
    except OSError as exc:
        print(f"phone: {exc.strerror or exc}", file=sys.stderr)
        return 1
    print(_USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())