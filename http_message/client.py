from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .abstraction.headers import HeaderCollection
from .abstraction.http import Format
from .abstraction.request import Request
from .abstraction.response import Response

__all__ = ["Client"]


@dataclass(slots=True)
class Client:
    """
    Владелец сообщений: хранит настройки форматов и создаёт Request/Response.

    Сетевого транспорта здесь нет: клиент только связывает сообщения с
    настройками.

    Пример::

        client = Client(base_url="https://api.example.com", request_format=Format.JSON)
        request = client.create_request(url="users", data={"name": "bob"})
        request.format  # Format.JSON
    """

    base_url: str = ""
    """Prefix for relative request URLs."""

    request_format: str | Format = Format.URLENCODED
    """Default format of request bodies."""

    response_format: Optional[str | Format] = None
    """Forced format of response bodies; ``None`` means detect per response."""

    def create_request(self, **kwargs: Any) -> Request:
        return Request(client=self, **kwargs)

    def create_response(
        self,
        content: str | bytes | None = None,
        headers: Mapping[str, Any] | HeaderCollection | None = None,
    ) -> Response:
        return Response(client=self, content=content, headers=headers)
