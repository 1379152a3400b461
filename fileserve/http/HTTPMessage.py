import re
from .HTTPStatus import HTTPStatus
from fileserve import utils
from fileserve.utils.logger import logger

REQUEST_LINE_PREFIX = "GET "
MAX_LINE = 65536
_WHITESPACE = re.compile(r"\s+")


def parse_request_line(line):
    """
    Extract the resource path from a `GET` request line.

        GET /index.html HTTP/1.1 -> index.html
    """
    target = line[len(REQUEST_LINE_PREFIX):]
    if target.startswith("/"):
        target = target[1:]
    # File names containing whitespace are not supported
    return _WHITESPACE.split(target, maxsplit=1)[0]


def _readline(fp):
    """
    Read one line of at most `MAX_LINE` bytes. The remainder of a longer
    line is read and dropped, so its tail never counts as a line of its own.
    """
    line = fp.readline(MAX_LINE + 1)
    if len(line) > MAX_LINE and not line.endswith(b"\n"):
        logger.warning("Request line longer than %d bytes truncated", MAX_LINE)
        while True:
            rest = fp.readline(MAX_LINE + 1)
            if not rest or rest.endswith(b"\n"):
                break
        line = line[:MAX_LINE]
    return line


def read_request_path(fp):
    """
    Read the request head from `fp` up to the blank line and return the
    path of the first `GET` line, or "" when there is none.

    Every other line is consumed and ignored. A read error ends the loop and
    whatever was captured so far is returned.
    """
    path = None

    while True:
        try:
            line = _readline(fp)
        except OSError as e:
            logger.warning("Request error: %s", e)
            break
        # Stream closed before the blank line
        if not line:
            break

        line = str(line, "iso-8859-1").rstrip("\r\n")
        logger.debug("Request line: (%s)", line)

        if path is None and line.startswith(REQUEST_LINE_PREFIX):
            path = parse_request_line(line)

        if len(line) == 0:
            break

    return path or ""


class Request:
    """ Request from client """

    def __init__(self, path=""):
        self.path = path


class Response:
    """ Response to client """
    HTTP_VERSION = "HTTP/1.1"

    def __init__(self, stream=None):
        self.status = None
        self.msg = None

        # lower-cased name -> (name, value), in insertion order
        self.headers = {}

        self.stream = stream

    def set_status_line(self, status, msg=None):
        self.status = status
        self.msg = msg if msg else HTTPStatus(status).phrase
        self.add_header("Date", utils.formatdate(usegmt=True))

    def add_header(self, k, v):
        self.headers[k.lower()] = (k, v)

    def get_header(self, k):
        item = self.headers.get(k.lower())
        return item[1] if item else None

    def header_encode(self, header):
        return header.encode("latin-1", "strict")

    def write_headers(self):
        """ Write the status line and headers, closed by one blank line """
        buffer = [("%s %d %s\r\n" % (Response.HTTP_VERSION, self.status, self.msg))] + \
            [("%s: %s\r\n" % (k, v)) for k, v in self.headers.values()] + \
            ["\r\n"]
        self.stream.write(b"".join(map(self.header_encode, buffer)))

        self.headers.clear()
