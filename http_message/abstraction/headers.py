from __future__ import annotations

from typing import Any, Iterator


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class HeaderCollection:
    """
    Ordered multi-map of HTTP headers.

    Names are matched case-insensitively; the spelling from the first
    insert of a name is the one shown when iterating.
    """

    def __init__(self) -> None:
        # lower-cased name -> (display name, values)
        self._headers: dict[str, tuple[str, list]] = {}

    # ────── dunder helpers ──────
    def __iter__(self) -> Iterator[tuple[str, list]]:
        for name, values in self._headers.values():
            yield name, list(values)

    def __len__(self) -> int:
        return len(self._headers)

    def __bool__(self) -> bool:
        return bool(self._headers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __repr__(self) -> str:
        return f"HeaderCollection({self.to_dict()!r})"

    # ────── CRUD ──────
    def count(self) -> int:
        """Number of distinct header names."""
        return len(self._headers)

    def get(self, name: str, default: Any = None, first: bool = True) -> Any:
        """Первое значение заголовка (или весь список при ``first=False``)."""
        entry = self._headers.get(name.lower())
        if entry is None:
            return default
        values = entry[1]
        if first:
            return values[0] if values else default
        return list(values)

    def has(self, name: str) -> bool:
        return name.lower() in self._headers

    def set(self, name: str, value: Any) -> HeaderCollection:
        """Заменить все значения заголовка."""
        key = name.lower()
        display = self._headers[key][0] if key in self._headers else name
        self._headers[key] = (display, _as_list(value))
        return self

    def add(self, name: str, value: Any) -> HeaderCollection:
        """Добавить значение(я), не трогая уже существующие."""
        key = name.lower()
        if key not in self._headers:
            self._headers[key] = (name, [])
        self._headers[key][1].extend(_as_list(value))
        return self

    def remove(self, name: str) -> list | None:
        """Удалить заголовок; вернёт его значения или None."""
        entry = self._headers.pop(name.lower(), None)
        return None if entry is None else entry[1]

    def remove_all(self) -> None:
        self._headers.clear()

    def to_dict(self) -> dict[str, list]:
        return {name: list(values) for name, values in self._headers.values()}
