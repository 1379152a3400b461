import threading

import pytest

from fileserve.config import ServerConfig
from fileserve.server import HTTPRequestHandler, TCPServer
from helpers import PNG_BYTES, ICO_BYTES


@pytest.fixture
def docroot(tmp_path):
    (tmp_path / "index.html").write_text("Hello <cs371server> on <cs371date>", encoding="utf-8")
    (tmp_path / "plain.html").write_text("<p>nothing to replace</p>\n", encoding="utf-8")
    (tmp_path / "logo.png").write_bytes(PNG_BYTES)
    (tmp_path / "photo.jpg").write_bytes(PNG_BYTES[::-1])
    (tmp_path / "anim.gif").write_bytes(b"GIF89a" + PNG_BYTES[:1000])
    (tmp_path / "favicon.ico").write_bytes(ICO_BYTES)
    (tmp_path / "notes.txt").write_text("server=<cs371server>\n", encoding="utf-8")
    (tmp_path / "README").write_text("no suffix <cs371server>", encoding="utf-8")
    (tmp_path / "broken.html").write_bytes(b"\xff\xfe\xfa not utf-8")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "page.html").write_text("nested <cs371server>", encoding="utf-8")
    (tmp_path / "images.png").mkdir()
    return tmp_path


@pytest.fixture
def config(docroot):
    return ServerConfig(directory=str(docroot), timeout=5)


@pytest.fixture
def live_server(config):
    http_server = TCPServer(("127.0.0.1", 0), HTTPRequestHandler, config)
    thread = threading.Thread(target=http_server.serve_forever, kwargs={"poll_interval": 0.05})
    thread.daemon = True
    thread.start()

    yield "http://127.0.0.1:%d" % http_server.server_address[1]

    http_server.shutdown()
    http_server.server_close()
    thread.join(5)
