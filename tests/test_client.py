from __future__ import annotations

from http_message import Client, Format, Request, Response


def test_factories_attach_client():
    client = Client(base_url="https://example.com")
    req = client.create_request(url="/a", data={"x": "1"})
    resp = client.create_response(content="ok", headers={"http-code": "200"})

    assert isinstance(req, Request) and req.client is client
    assert isinstance(resp, Response) and resp.client is client
    assert req.data == {"x": "1"}
    assert resp.is_ok and resp.content == "ok"


def test_client_defaults():
    client = Client()
    assert client.base_url == ""
    assert client.request_format is Format.URLENCODED
    assert client.response_format is None
