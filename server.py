import argparse
import threading
import time
from fileserve import config
from fileserve.config import ServerConfig
from fileserve.server import HTTPRequestHandler, TCPServer
from fileserve.utils.logger import logger, set_level


def non_negative_float(value):
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be 0 or greater, got %s" % value)
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve files, one request per connection.")
    parser.add_argument("--host", default=config.HOST, help="bind address (default: all interfaces)")
    parser.add_argument("-p", "--port", type=int, default=config.PORT)
    parser.add_argument("-d", "--directory", default=config.DOCUMENT_ROOT, help="document root")
    parser.add_argument("--server-name", default=config.SERVER_NAME)
    parser.add_argument(
        "--timeout",
        type=non_negative_float,
        default=config.CONNECTION_TIMEOUT,
        help="seconds to wait for a request before giving up, 0 to wait forever",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    set_level(args.log_level)

    server_config = ServerConfig(
        directory=args.directory,
        server_name=args.server_name,
        timeout=args.timeout or None,
    )
    http_server = TCPServer((args.host, args.port), HTTPRequestHandler, server_config)
    logger.info("Serving %s on port %d", server_config.directory, http_server.server_address[1])

    try:
        http_thread = threading.Thread(target=http_server.serve_forever)
        http_thread.daemon = True
        http_thread.start()

        while True:
            time.sleep(1)

    except KeyboardInterrupt:
        http_server.shutdown()
        http_server.server_close()
        print("Server close.")


if __name__ == "__main__":
    main()
