from fileserve.http import HTTPStatus
from fileserve import utils
from fileserve.http.HTTPMessage import Response, Request, read_request_path
from fileserve.config import ServerConfig, DEFAULT_CONTENT_TYPE
from fileserve.utils.logger import logger
import os, io, socket, time


class HTTPRequestHandler:
    """
    Serve exactly one request on `request`, then close it.

    The request head is read up to the blank line, the `GET` path is resolved
    under the configured document root, and the response is written as a
    header block followed by either a templated text body or the file's raw
    bytes. There is no Content-Length: the client sees the end of the body
    when the connection closes.
    """

    def __init__(self, request, client_address, server):
        self.request = request
        self.client_address = client_address
        self.server = server

        self.config = getattr(server, "config", None) or ServerConfig()
        self.directory = os.path.abspath(self.config.directory)

        self.setup()

        try:
            self.handle()
        except Exception as e:
            logger.warning("Output error: %s", e)
        finally:
            self.finish()

    def setup(self):
        """Setup the request socket"""
        if self.config.timeout:
            self.request.settimeout(self.config.timeout)

        self.rfile = self.request.makefile("rb", -1)
        self.wfile = _SocketWriter(self.request)

        self._request = Request()
        self._response = Response(self.wfile)

    def handle(self):
        """Handle the http request"""
        logger.info("Handling connection from %s", self.client_address)

        self._request.path = read_request_path(self.rfile)
        logger.info("FilePath = %s", self._request.path)

        ctype = self.send_head()
        if ctype is None:
            return

        path = self.path2local(self._request.path)
        if ctype in self.config.binary_types:
            self.send_binary(path)
        else:
            self.send_template(path)

    def send_head(self):
        """
        Write the status line and headers.

        Return the content type of the file to send, or None when a 404 was
        sent in full.
        """
        path = self.path2local(self._request.path)

        if not self._request.path or not os.path.isfile(path):
            self.send_not_found()
            return None

        ctype = utils.guess_type(self._request.path, self.config.content_types)
        self.write_head(HTTPStatus.OK, ctype)
        return ctype

    def write_head(self, status, ctype):
        self._response.set_status_line(status)
        self._response.add_header("Server", self.config.server_name)
        self._response.add_header("Connection", "close")
        self._response.add_header("Content-Type", ctype)
        self._response.write_headers()

    def send_not_found(self):
        self.write_head(HTTPStatus.NOT_FOUND, DEFAULT_CONTENT_TYPE)
        self.wfile.write(self.config.not_found_html.encode())

    def send_template(self, path):
        """Send a text file with the date and server placeholders filled in"""
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("ERROR Reading File: %s", e)
            return

        content = utils.render_template(
            content,
            {
                self.config.date_tag: utils.format_zone_date(self.config.template_timezone),
                self.config.server_tag: self.config.server_name,
            },
        )
        self.wfile.write(content.encode("utf-8"))

    def send_binary(self, path):
        """Copy a file to the client byte for byte"""
        try:
            f = open(path, "rb")
        except OSError as e:
            logger.warning("ERROR Reading File: %s", e)
            return

        buffer = bytearray(self.config.buffer_size)
        with f, memoryview(buffer) as view:
            while True:
                try:
                    n = f.readinto(buffer)
                except OSError as e:
                    logger.warning("ERROR Reading File: %s", e)
                    break
                if not n:
                    break
                # only the part filled by this read
                self.wfile.write(view[:n])

    def path2local(self, path):
        """
        Convert a request path to a local file system equivalent.
        Example:
            document root is /srv/www
            GET /img/logo.png -> /srv/www/img/logo.png
        """
        return os.path.join(self.directory, path)

    def finish(self):
        try:
            self.rfile.close()
            self.linger()
        finally:
            self.request.close()
        logger.info("Done handling connection.")

    def linger(self):
        """
        Half-close, then read off client input until it closes its side or
        `linger` seconds pass, so close() never finds unread input.
        """
        try:
            self.request.shutdown(socket.SHUT_WR)
        except OSError:
            return

        deadline = time.monotonic() + self.config.linger
        try:
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                self.request.settimeout(remaining)
                if not self.request.recv(self.config.buffer_size):
                    break
        except OSError as e:
            logger.debug("Linger ended: %s", e)


class _SocketWriter(io.BufferedIOBase):
    """
    Simple writable BufferedIOBase implementation for a socket
    Does not hold data in a buffer, avoiding any need to call flush().
    """

    def __init__(self, sock):
        self._sock = sock

    def writable(self):
        return True

    def write(self, b):
        if isinstance(b, str):
            b = b.encode()

        self._sock.sendall(b)
        with memoryview(b) as view:
            return view.nbytes

    def fileno(self):
        return self._sock.fileno()
