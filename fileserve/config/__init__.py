import datetime

__all__ = [
    "SERVER_NAME",
    "HOST",
    "PORT",
    "DOCUMENT_ROOT",
    "CONNECTION_TIMEOUT",
    "LINGER_TIMEOUT",
    "BUFFER_SIZE",
    "DATE_TAG",
    "SERVER_TAG",
    "TEMPLATE_TIMEZONE",
    "DEFAULT_CONTENT_TYPE",
    "CONTENT_TYPES",
    "BINARY_TYPES",
    "NOT_FOUND_HTML",
    "ServerConfig",
]

SERVER_NAME = "JFS Server"

HOST = ""
PORT = 8080
DOCUMENT_ROOT = "."

# A client that sends nothing for `CONNECTION_TIMEOUT` seconds has its request
# read cut short. `None` waits forever.
CONNECTION_TIMEOUT = 20

# Upper bound on draining client input after the response, before close
LINGER_TIMEOUT = 2

BUFFER_SIZE = 8192

# Placeholders replaced in every text body
DATE_TAG = "<cs371date>"
SERVER_TAG = "<cs371server>"
TEMPLATE_TIMEZONE = datetime.timezone(datetime.timedelta(hours=-7), "MST")

DEFAULT_CONTENT_TYPE = "text/html"

# suffix -> MIME type, matched case-sensitively
CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpg",
    "gif": "image/gif",
    "ico": "image/x-icon",
}

# MIME types streamed byte for byte instead of templated
BINARY_TYPES = frozenset(CONTENT_TYPES.values())

NOT_FOUND_HTML = (
    "<html><head><title>404 - File or directory not found.</title></head><body>\n"
    "<h3>404 Not Found</h3>\n"
    "</body></html>\n"
)


class ServerConfig:
    """Values shared by every handler of one server."""

    def __init__(
        self,
        directory=DOCUMENT_ROOT,
        server_name=SERVER_NAME,
        timeout=CONNECTION_TIMEOUT,
        content_types=None,
        binary_types=BINARY_TYPES,
        not_found_html=NOT_FOUND_HTML,
        date_tag=DATE_TAG,
        server_tag=SERVER_TAG,
        template_timezone=TEMPLATE_TIMEZONE,
        buffer_size=BUFFER_SIZE,
        linger=LINGER_TIMEOUT,
    ):
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must be non-negative or None, got %r" % (timeout,))
        if linger < 0:
            raise ValueError("linger must be non-negative, got %r" % (linger,))
        self.directory = directory
        self.server_name = server_name
        self.timeout = timeout
        self.content_types = dict(CONTENT_TYPES if content_types is None else content_types)
        self.binary_types = frozenset(binary_types)
        self.not_found_html = not_found_html
        self.date_tag = date_tag
        self.server_tag = server_tag
        self.template_timezone = template_timezone
        self.buffer_size = buffer_size
        self.linger = linger
