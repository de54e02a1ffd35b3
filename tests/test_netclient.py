import io
import socket
import threading

import pytest

from pcmtools.netclient import (
    main,
    receive_all,
    send_then_receive,
    udp_send_then_receive,
)


def _tcp_server(handler):
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    port = listener.getsockname()[1]

    def run():
        conn, _ = listener.accept()
        conn.settimeout(5)
        with conn:
            handler(conn)
        listener.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, thread


def _recv_until_eof(conn):
    parts = []
    while data := conn.recv(4096):
        parts.append(data)
    return b"".join(parts)


def test_receive_all_copies_everything():
    payload = bytes(range(256)) * 10

    port, thread = _tcp_server(lambda conn: conn.sendall(payload))
    out = io.BytesIO()
    count = receive_all("127.0.0.1", port, out)
    thread.join(5)
    assert out.getvalue() == payload
    assert count == len(payload)


def test_send_then_receive_echo_round_trip():
    payload = b"abcdefghij" * 300

    def echo(conn):
        conn.sendall(_recv_until_eof(conn))

    port, thread = _tcp_server(echo)
    out = io.BytesIO()
    count = send_then_receive("127.0.0.1", port, io.BytesIO(payload), out)
    thread.join(5)
    assert out.getvalue() == payload
    assert count == len(payload)


def test_send_then_receive_empty_input():
    received = []

    def handler(conn):
        received.append(_recv_until_eof(conn))
        conn.sendall(b"done")

    port, thread = _tcp_server(handler)
    out = io.BytesIO()
    send_then_receive("127.0.0.1", port, io.BytesIO(b""), out)
    thread.join(5)
    assert received == [b""]
    assert out.getvalue() == b"done"


def test_udp_round_trip():
    payload = bytes(range(200)) * 12 + b"tail"
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)
    port = server.getsockname()[1]
    expected_datagrams = -(-len(payload) // 1024)
    seen = []

    def run():
        client = None
        for _ in range(expected_datagrams):
            data, client = server.recvfrom(2048)
            seen.append(data)
        for data in seen:
            server.sendto(data, client)
        server.sendto(b"", client)
        server.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    out = io.BytesIO()
    count = udp_send_then_receive("127.0.0.1", port, io.BytesIO(payload), out)
    thread.join(5)
    assert b"".join(seen) == payload
    assert all(len(d) <= 1024 for d in seen)
    assert out.getvalue() == payload
    assert count == len(payload)


@pytest.mark.parametrize(
    "func, extra",
    [
        (receive_all, ()),
        (send_then_receive, (io.BytesIO(b"x"),)),
        (udp_send_then_receive, (io.BytesIO(b"x"),)),
    ],
)
def test_invalid_ip_rejected(func, extra):
    with pytest.raises(ValueError, match="Invalid IP address"):
        func("999.1.2.3", 80, *extra, io.BytesIO())


def test_connection_refused_raises():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionRefusedError):
        receive_all("127.0.0.1", port, io.BytesIO())


def test_main_usage(capsys):
    assert main(["recv", "127.0.0.1"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_invalid_ip(capsys):
    assert main(["recv", "not-an-ip", "80"]) == 1
    assert "Invalid IP address" in capsys.readouterr().out


def test_main_connection_error(capsys):
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["recv", "127.0.0.1", str(port)]) == 1
    assert capsys.readouterr().err.startswith("recv:")