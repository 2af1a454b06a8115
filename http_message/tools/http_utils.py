"""
HTTP-helpers (Set-Cookie parsing, body format detection).

Только stdlib + наша модель Cookie. Все функции чистые: удобно тестировать отдельно.
"""
from __future__ import annotations

import re
from email.utils import parsedate_to_datetime
from http.cookies import CookieError, SimpleCookie
from typing import Any, Iterable, Optional

from ..abstraction.cookies import Cookie
from ..abstraction.headers import HeaderCollection
from ..abstraction.http import Format

# ───────────────────── Set-Cookie → Cookie objects ───────────────────


def _expires_timestamp(raw: str) -> int:
    """Unix-время из атрибута *Expires*; 0, если атрибута нет или он битый."""
    if not raw:
        return 0
    try:
        stamp = int(parsedate_to_datetime(raw).timestamp())
    except (TypeError, ValueError):
        return 0
    # 0 зарезервирован под сессионную куку
    return max(stamp, 1)


def parse_set_cookie(raw_headers: Iterable[str], default_domain: str = "") -> list[Cookie]:
    """Разобрать значения заголовков *Set-Cookie*; битые строки пропускаются."""
    out: list[Cookie] = []
    for raw in raw_headers:
        jar = SimpleCookie()
        try:
            jar.load(raw)
        except CookieError:
            continue
        for m in jar.values():
            max_age = m["max-age"]
            out.append(
                Cookie(
                    name=m.key,
                    value=m.value,
                    domain=(m["domain"] or default_domain).lower(),
                    path=m["path"] or "/",
                    expires=_expires_timestamp(m["expires"]),
                    max_age=int(max_age) if str(max_age).isdigit() else 0,
                    same_site=m["samesite"].capitalize() or "Lax",
                    secure=bool(m["secure"]),
                    http_only=bool(m["httponly"]),
                )
            )
    return out


# ───────────────────── format detection ──────────────────────────────

_JSON_CONTENT = re.compile(r"^(\{.*\}|\[.*\])$", re.S)
_URLENCODED_CONTENT = re.compile(r"^[^=&\s]+=[^=&]*(&[^=&\s]+=[^=&]*)*$")
_XML_CONTENT = re.compile(r"^<.*>$", re.S)


def detect_format_by_headers(headers: HeaderCollection) -> Optional[Format]:
    """Формат по заголовку ``Content-Type`` (или None)."""
    ctype = str(headers.get("content-type", "")).lower()
    if not ctype:
        return None
    if "json" in ctype:
        return Format.JSON
    if "urlencoded" in ctype:
        return Format.URLENCODED
    if "xml" in ctype:
        return Format.XML
    return None


def detect_format_by_content(content: Any) -> Optional[Format]:
    """Формат по виду самого тела (или None)."""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    if not content:
        return None
    content = content.strip()
    if _JSON_CONTENT.match(content):
        return Format.JSON
    if _XML_CONTENT.match(content):
        return Format.XML
    if _URLENCODED_CONTENT.match(content):
        return Format.URLENCODED
    return None
