from __future__ import annotations

"""
abstraction.message: базовое HTTP-сообщение (общий предок Request/Response).

Заголовки и куки принимаются в «сыром» виде (dict / список дескрипторов)
или уже готовыми коллекциями. Нормализация в :class:`HeaderCollection` /
:class:`CookieCollection` происходит лениво, один раз, при первом чтении.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from .cookies import Cookie, CookieCollection
from .headers import HeaderCollection
from .http import Format

if TYPE_CHECKING:
    from ..client import Client

__all__ = ["Message"]

logger = logging.getLogger(__name__)


def _as_cookie(cookie: Cookie | Mapping[str, Any]) -> Cookie:
    if isinstance(cookie, Cookie):
        return cookie
    return Cookie.from_descriptor(cookie)


class Message:
    """Represents a base HTTP message."""

    def __init__(
        self,
        *,
        client: Optional[Client] = None,
        headers: Mapping[str, Any] | HeaderCollection | None = None,
        cookies: Iterable[Cookie | Mapping[str, Any]] | CookieCollection | None = None,
        content: str | bytes | None = None,
        data: Optional[Mapping[str, Any]] = None,
        format: str | Format | None = None,
    ) -> None:
        self.client: Optional[Client] = client
        """The client that produced or will send this message."""

        self._headers = headers
        self._cookies = cookies
        self._content = content
        self._data = data
        self._format = format

    # ────── headers ──────
    def set_headers(self, headers: Mapping[str, Any] | HeaderCollection | None) -> Message:
        """Store headers as given: ``{name: value}`` or a ready collection."""
        self._headers = headers
        return self

    def get_headers(self) -> HeaderCollection:
        """Header collection, built from the raw mapping on first access."""
        if not isinstance(self._headers, HeaderCollection):
            collection = HeaderCollection()
            if self._headers:
                for name, value in self._headers.items():
                    collection.set(name, value)
            self._headers = collection
        return self._headers

    def add_headers(self, headers: Mapping[str, Any]) -> Message:
        """Append headers; values of an existing name accumulate."""
        collection = self.get_headers()
        for name, value in headers.items():
            collection.add(name, value)
        return self

    def has_headers(self) -> bool:
        """Whether any header is set, without building the collection."""
        if isinstance(self._headers, HeaderCollection):
            return self._headers.count() > 0
        return bool(self._headers)

    # ────── cookies ──────
    def set_cookies(
        self, cookies: Iterable[Cookie | Mapping[str, Any]] | CookieCollection | None
    ) -> Message:
        """Store cookies as given: a list of cookies/descriptors or a ready collection."""
        self._cookies = cookies
        return self

    def get_cookies(self) -> CookieCollection:
        """Cookie collection, built from the raw list on first access."""
        if not isinstance(self._cookies, CookieCollection):
            collection = CookieCollection()
            for cookie in self._cookies or ():
                collection.add(_as_cookie(cookie))
            self._cookies = collection
        return self._cookies

    def add_cookies(self, cookies: Iterable[Cookie | Mapping[str, Any]]) -> Message:
        collection = self.get_cookies()
        for cookie in cookies:
            collection.add(_as_cookie(cookie))
        return self

    def has_cookies(self) -> bool:
        """Whether any cookie is set, without building the collection."""
        if isinstance(self._cookies, CookieCollection):
            return self._cookies.count() > 0
        return bool(self._cookies)

    # ────── body ──────
    def set_content(self, content: str | bytes | None) -> Message:
        self._content = content
        return self

    def get_content(self) -> str | bytes | None:
        """Raw body."""
        return self._content

    def set_data(self, data: Optional[Mapping[str, Any]]) -> Message:
        self._data = data
        return self

    def get_data(self) -> Optional[Mapping[str, Any]]:
        """Data fields composing (or parsed from) the content."""
        return self._data

    def set_format(self, format: str | Format) -> Message:
        self._format = format
        return self

    def get_format(self) -> str | Format:
        """Body format name; resolved once from :meth:`default_format` if unset."""
        if self._format is None:
            self._format = self.default_format()
        return self._format

    def default_format(self) -> str | Format:
        """Format used when none was set explicitly."""
        return Format.URLENCODED

    # ────── properties ──────
    # делегируют в get_*/set_*: переопределения в подклассах учитываются
    @property
    def headers(self) -> HeaderCollection:
        return self.get_headers()

    @headers.setter
    def headers(self, value: Mapping[str, Any] | HeaderCollection | None) -> None:
        self.set_headers(value)

    @property
    def cookies(self) -> CookieCollection:
        return self.get_cookies()

    @cookies.setter
    def cookies(self, value: Iterable[Cookie | Mapping[str, Any]] | CookieCollection | None) -> None:
        self.set_cookies(value)

    @property
    def content(self) -> str | bytes | None:
        return self.get_content()

    @content.setter
    def content(self, value: str | bytes | None) -> None:
        self.set_content(value)

    @property
    def data(self) -> Optional[Mapping[str, Any]]:
        return self.get_data()

    @data.setter
    def data(self, value: Optional[Mapping[str, Any]]) -> None:
        self.set_data(value)

    @property
    def format(self) -> str | Format:
        return self.get_format()

    @format.setter
    def format(self, value: str | Format) -> None:
        self.set_format(value)

    # ────── rendering ──────
    def _header_lines(self) -> list[str]:
        return [
            f"{name} : {value}"
            for name, values in self.get_headers()
            for value in values
        ]

    def _content_text(self) -> str:
        content = self.get_content()
        if content is None:
            return ""
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        return str(content)

    def to_string(self) -> str:
        """Headers (one ``name : value`` line each), a blank line, then the content."""
        return "\n".join(self._header_lines()) + "\n\n" + self._content_text()

    def __str__(self) -> str:
        # str() вызывают из логов и f-строк, наружу ошибку не пропускаем
        try:
            return self.to_string()
        except Exception:
            logger.exception("Failed to render %s as string", type(self).__name__)
            return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} format={self._format!r}>"
