from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlsplit

from .cookies import CookieCollection
from .http import Format
from .message import Message
from ..tools.http_utils import (
    detect_format_by_content,
    detect_format_by_headers,
    parse_set_cookie,
)


class Response(Message):
    """Represents the response of a request."""

    def __init__(self, *, status_code: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._status_code = status_code

    @property
    def status_code(self) -> Optional[int]:
        """Explicit status code, else the one from the ``http-code`` header."""
        if self._status_code is not None:
            return self._status_code
        if not self.has_headers():
            return None
        raw = str(self.get_headers().get("http-code", "")).strip()
        return int(raw) if raw.isdigit() else None

    @status_code.setter
    def status_code(self, value: Optional[int]) -> None:
        self._status_code = value

    @property
    def is_ok(self) -> bool:
        """Whether the status code is 2xx."""
        code = self.status_code
        return code is not None and 200 <= code < 300

    def get_cookies(self) -> CookieCollection:
        """Cookies of the response; parsed from ``Set-Cookie`` if none were given."""
        collection = super().get_cookies()
        if collection.count() == 0 and self.has_headers():
            raw = self.get_headers().get("set-cookie", first=False)
            for cookie in parse_set_cookie(raw or [], self._cookie_domain()):
                collection.add(cookie)
        return collection

    def _cookie_domain(self) -> str:
        if self.client is None or not self.client.base_url:
            return ""
        return urlsplit(self.client.base_url).hostname or ""

    def default_format(self) -> str | Format:
        """Client's ``response_format``, else detected from headers, then content."""
        if self.client is not None and self.client.response_format is not None:
            return self.client.response_format
        if self.has_headers():
            detected = detect_format_by_headers(self.get_headers())
            if detected is not None:
                return detected
        detected = detect_format_by_content(self.get_content())
        if detected is not None:
            return detected
        return super().default_format()
