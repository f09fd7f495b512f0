from enum import auto

from leagueboard.utils.types import EnumAutoStr


class HTTPMethod(EnumAutoStr):
    GET = auto()
    POST = auto()
    PATCH = auto()
    PUT = auto()
    DELETE = auto()
