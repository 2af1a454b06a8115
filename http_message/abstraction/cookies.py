from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator, Literal, Mapping
from dataclasses import dataclass, field

from playwright.async_api import Cookie as PlaywrightCookie

# camelCase-ключи, которые отдаёт Playwright (context.cookies())
_DESCRIPTOR_ALIASES = {
    "httpOnly": "http_only",
    "sameSite": "same_site",
    "maxAge": "max_age",
}
# ключи Playwright без аналога в Cookie
_IGNORED_DESCRIPTOR_KEYS = frozenset({"partitionKey"})


@dataclass
class Cookie:
    """
    A dataclass containing the information about a cookie.
    
    Please, see the MDN Web Docs for the full documentation:
    https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Set-Cookie
    """

    name: str
    """
    The name used to identify the cookie in the Cookie header.
    """
    
    value: str
    """
    The value sent with the Cookie header.
    """
    
    path: str = "/"
    """
    The path from which the cookie will be readable.
    """
    
    domain: str = ""
    """
    The domain from which the cookie will be readable.
    """
    
    expires: int = 0
    """
    The date when the cookie expires, as a Unix timestamp. ``0`` means a session cookie.
    """
    
    max_age: int = 0
    """
    The maximum age of the cookie in seconds.
    """
    
    same_site: Literal["Lax", "Strict", "None"] = "Lax"
    """
    Whether the cookie is sent with cross-site requests.
    """
    
    secure: bool = False
    """
    Whether the cookie is only sent over a secure connection.
    """
    
    http_only: bool = False
    """
    Whether the cookie is hidden from JavaScript.
    """

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any]) -> Cookie:
        """
        Build a cookie from a raw descriptor such as
        ``{"name": "sid", "value": "1", "httpOnly": True}``.

        Both snake_case and Playwright camelCase keys are accepted.
        Playwright-only keys with no field here (``partitionKey``) are ignored.
        Unknown keys or a missing name/value raise :class:`TypeError`.
        """
        kwargs = {
            _DESCRIPTOR_ALIASES.get(k, k): v
            for k, v in descriptor.items()
            if k not in _IGNORED_DESCRIPTOR_KEYS
        }
        if kwargs.get("expires") is not None:
            # Playwright отдаёт -1 для сессионных кук
            kwargs["expires"] = max(int(kwargs["expires"]), 0)
        return cls(**kwargs)

    def is_expired(self) -> bool:
        """Check if the cookie is expired."""
        now = datetime.now().timestamp()
        return bool(self.expires) and now >= self.expires

    def to_playwright(self) -> PlaywrightCookie:
        return PlaywrightCookie(
            name=self.name,
            value=self.value,
            domain=self.domain,
            path=self.path,
            expires=self.expires or -1,
            httpOnly=self.http_only,
            secure=self.secure,
            sameSite=self.same_site,
        )


@dataclass
class CookieCollection:
    """
    Cookies indexed by name.

    Adding a cookie whose name is already present replaces the stored one
    and keeps its position.
    """

    storage: dict[str, Cookie] = field(default_factory=dict)

    # ────── dunder helpers ──────
    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self.storage.values()))

    def __len__(self) -> int:
        return len(self.storage)

    def __bool__(self) -> bool:
        return bool(self.storage)

    def __contains__(self, name: object) -> bool:
        return name in self.storage

    # ────── CRUD ──────
    def count(self) -> int:
        return len(self.storage)

    def get(self, name: str) -> Cookie | None:
        """Получить куку по имени."""
        return self.storage.get(name)

    def has(self, name: str) -> bool:
        return name in self.storage

    def add(self, cookie: Cookie) -> None:
        """Добавить куку (одноимённая заменяется)."""
        self.storage[cookie.name] = cookie

    def remove(self, name: str) -> Cookie | None:
        """Удалить куку по имени."""
        return self.storage.pop(name, None)

    def remove_all(self) -> None:
        self.storage.clear()

    def to_cookie_header(self) -> str:
        """Сериализовать все куки в значение одного заголовка ``Cookie``."""
        return "; ".join(f"{c.name}={c.value}" for c in self.storage.values())
