from .cookies import Cookie, CookieCollection
from .headers import HeaderCollection
from .http import Format, HttpMethod
from .message import Message
from .request import Request
from .response import Response

__all__ = [
    "Cookie",
    "CookieCollection",
    "Format",
    "HeaderCollection",
    "HttpMethod",
    "Message",
    "Request",
    "Response",
]
