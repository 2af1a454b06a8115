from enum import Enum


class HttpMethod(Enum):
    """HTTP methods a request can be sent with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class Format(str, Enum):
    """
    Names of the body formats a message can be serialized with.

    Members compare equal to their plain string value, so
    ``message.format == "json"`` works either way.
    """

    URLENCODED = "urlencoded"
    RAW_URLENCODED = "raw-urlencoded"
    JSON = "json"
    XML = "xml"

    def __str__(self) -> str:
        return self.value
