from enum import IntEnum

__all__ = ["HTTPStatus"]


class HTTPStatus(IntEnum):
    """ Status codes the server answers with, and their reason phrases """

    def __new__(cls, value, phrase):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.phrase = phrase
        return obj

    OK = 200, "OK"
    NOT_FOUND = 404, "Not Found"
