import socket
import threading
from types import SimpleNamespace

from fileserve.server import HTTPRequestHandler

# Contains bytes that are not valid UTF-8 and a CRLF pair, which a text
# round trip would mangle.
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
    + bytes(range(256)) * 40
    + b"\xff\xfe\r\n\r\n\x00IEND\xaeB`\x82"
)
ICO_BYTES = b"\x00\x00\x01\x00" + bytes(reversed(range(256))) * 3

DATE_PATTERN = r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun), \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2}"


def exchange(raw, config, close_write=True):
    """Run one handler over a socket pair and return everything it sent."""
    client, conn = socket.socketpair()
    server = SimpleNamespace(config=config)
    worker = threading.Thread(target=HTTPRequestHandler, args=(conn, ("test", 0), server))
    worker.start()
    try:
        client.sendall(raw)
        if close_write:
            client.shutdown(socket.SHUT_WR)
        chunks = []
        while True:
            data = client.recv(65536)
            if not data:
                break
            chunks.append(data)
    finally:
        client.close()
        worker.join(10)
    return b"".join(chunks)


def split_response(data):
    """Return (status line, [header lines], body)."""
    head, sep, body = data.partition(b"\r\n\r\n")
    assert sep, "header block is not terminated by a blank line"
    lines = head.decode("latin-1").split("\r\n")
    return lines[0], lines[1:], body


def header_dict(lines):
    return dict(line.split(": ", 1) for line in lines)
