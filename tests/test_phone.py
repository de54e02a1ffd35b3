import io
import socket
import threading

import pytest

from pcmtools.phone import (
    main,
    open_recorder,
    phone_client_session,
    phone_server_session,
    run_phone,
    serve_stream,
)


def _recv_until_eof(conn):
    parts = []
    while data := conn.recv(4096):
        parts.append(data)
    return b"".join(parts)


def _start(target):
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def test_open_recorder_pipes_output():
    with open_recorder("printf abc") as proc:
        data = proc.stdout.read()
    assert data == b"abc"
    assert proc.returncode == 0


def test_serve_stream_sends_source_to_one_client():
    payload = bytes(range(256)) * 12
    listener = socket.socket()
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    port = listener.getsockname()[1]
    result = []
    thread = _start(lambda: result.append(serve_stream(listener, io.BytesIO(payload))))
    with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
        received = _recv_until_eof(client)
    thread.join(5)
    listener.close()
    assert received == payload
    assert result == [len(payload)]


def test_server_session_answers_with_source():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    voice = b"voice"
    reply = b"reply-from-source"
    got = []

    def peer():
        b.sendall(voice)
        b.shutdown(socket.SHUT_WR)
        got.append(_recv_until_eof(b))

    thread = _start(peer)
    out = io.BytesIO()
    phone_server_session(a, io.BytesIO(reply), out)
    a.close()
    thread.join(5)
    b.close()
    assert out.getvalue() == voice
    assert got == [reply]


def test_server_session_stops_when_source_ends():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    got = []

    def peer():
        b.sendall(b"voice")
        got.append(_recv_until_eof(b))

    thread = _start(peer)
    out = io.BytesIO()
    phone_server_session(a, io.BytesIO(b""), out)
    a.close()
    thread.join(5)
    b.close()
    assert out.getvalue() == b"voice"
    assert got == [b""]


def test_client_session_sends_then_plays_reply():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    source = bytes(range(100)) * 3
    got = []

    def peer():
        data = b""
        while len(data) < len(source):
            data += b.recv(4096)
        got.append(data)
        b.sendall(b"reply")
        got.append(_recv_until_eof(b))

    thread = _start(peer)
    out = io.BytesIO()
    phone_client_session(a, io.BytesIO(source), out)
    a.close()
    thread.join(5)
    b.close()
    assert got == [source, b""]
    assert out.getvalue() == b"reply"


def test_client_session_stops_when_peer_closes():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.close()
    out = io.BytesIO()
    with pytest.raises(OSError):
        phone_client_session(a, io.BytesIO(b"data" * 5000), out)
    a.close()
    assert out.getvalue() == b""


@pytest.mark.parametrize("args", [[], ["1", "2", "3"]])
def test_run_phone_rejects_argument_count(args):
    with pytest.raises(ValueError, match="Usage"):
        run_phone(args)


def test_run_phone_rejects_invalid_ip():
    with pytest.raises(ValueError, match="Invalid IP address"):
        run_phone(["300.1.2.3", "5000"])


def test_main_usage(capsys):
    assert main(["bogus"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_phone_invalid_ip(capsys):
    assert main(["phone", "300.1.2.3", "5000"]) == 1
    assert "Invalid IP address" in capsys.readouterr().out