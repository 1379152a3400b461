import socket
import selectors
import threading
from fileserve.config import ServerConfig
from fileserve.utils.logger import logger


class TCPServer:
    """
    Listen on `server_address` and run `RequestHandlerClass(request,
    client_address, server)` in a fresh daemon thread for every connection.
    """

    backlog = 5

    def __init__(self, server_address, RequestHandlerClass, config=None):
        self.RequestHandlerClass = RequestHandlerClass
        self.config = config if config is not None else ServerConfig()
        self._stop = threading.Event()
        self._stopped = threading.Event()

        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.socket.bind(server_address)
            self.socket.listen(self.backlog)
        except OSError:
            self.socket.close()
            raise
        # real port when bound to 0
        self.server_address = self.socket.getsockname()

    def serve_forever(self, poll_interval=0.5):
        """Accept until `shutdown()` is called from another thread"""
        self._stopped.clear()
        try:
            with selectors.DefaultSelector() as selector:
                selector.register(self.socket, selectors.EVENT_READ)
                while not self._stop.is_set():
                    if selector.select(poll_interval) and not self._stop.is_set():
                        self._accept()
        finally:
            self._stop.clear()
            self._stopped.set()

    def _accept(self):
        try:
            request, client_address = self.socket.accept()
        except OSError as e:
            logger.warning("Accept error: %s", e)
            return

        worker = threading.Thread(
            target=self.RequestHandlerClass,
            args=(request, client_address, self),
            name="conn-%s:%s" % client_address[:2],
            daemon=True,
        )
        try:
            worker.start()
        except RuntimeError as e:
            logger.warning("Cannot start handler for %s: %s", client_address, e)
            request.close()

    def shutdown(self):
        """ Stop the serve_forever loop and wait for it to return """
        self._stop.set()
        self._stopped.wait()

    def server_close(self):
        self.socket.close()
