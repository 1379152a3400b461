from .HTTPMessage import Request, Response, read_request_path, parse_request_line
from .HTTPStatus import HTTPStatus

__all__ = ['HTTPStatus', 'Request', 'Response', 'read_request_path', 'parse_request_line']
