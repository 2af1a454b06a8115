from .abstraction.cookies import Cookie, CookieCollection
from .abstraction.headers import HeaderCollection
from .abstraction.http import Format, HttpMethod
from .abstraction.message import Message
from .abstraction.request import Request
from .abstraction.response import Response
from .client import Client

__all__ = [
    "Client",
    "Cookie",
    "CookieCollection",
    "Format",
    "HeaderCollection",
    "HttpMethod",
    "Message",
    "Request",
    "Response",
]

__version__ = "0.1.0"
