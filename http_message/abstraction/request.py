from __future__ import annotations

from typing import Any

from .http import Format, HttpMethod
from .message import Message


class Request(Message):
    """Represents all the data passed in the request."""

    def __init__(self, *, method: HttpMethod | str = HttpMethod.GET, url: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.method: HttpMethod = method if isinstance(method, HttpMethod) else HttpMethod(str(method).upper())
        """The method used in the request."""

        self.url: str = url
        """The URL of the request, relative to ``client.base_url`` if one is set."""

    @property
    def full_url(self) -> str:
        if self.client is not None and self.client.base_url and "://" not in self.url:
            return self.client.base_url.rstrip("/") + "/" + self.url.lstrip("/")
        return self.url

    def default_format(self) -> str | Format:
        if self.client is not None:
            return self.client.request_format
        return super().default_format()

    def to_string(self) -> str:
        """Request line, headers (plus a ``Cookie`` line), a blank line, then the content."""
        lines = [f"{self.method.value} {self.full_url}"]
        lines.extend(self._header_lines())
        if self.has_cookies():
            lines.append(f"Cookie : {self.get_cookies().to_cookie_header()}")
        return "\n".join(lines) + "\n\n" + self._content_text()
