from __future__ import annotations

import time

import pytest

from http_message import Cookie, CookieCollection


@pytest.fixture
def collection() -> CookieCollection:
    return CookieCollection()


# ---------------------------------------------------------------------------
# Cookie.from_descriptor
# ---------------------------------------------------------------------------
def test_descriptor_snake_case():
    c = Cookie.from_descriptor({"name": "sid", "value": "S", "http_only": True, "domain": "example.com"})
    assert c == Cookie(name="sid", value="S", domain="example.com", http_only=True)


def test_descriptor_playwright_keys_match_snake_case():
    pw = {
        "name": "sid",
        "value": "S",
        "domain": ".example.com",
        "path": "/",
        "expires": -1,
        "httpOnly": True,
        "secure": True,
        "sameSite": "Strict",
    }
    snake = {
        "name": "sid",
        "value": "S",
        "domain": ".example.com",
        "path": "/",
        "expires": 0,
        "http_only": True,
        "secure": True,
        "same_site": "Strict",
    }
    assert Cookie.from_descriptor(pw) == Cookie.from_descriptor(snake)


def test_descriptor_ignores_playwright_partition_key():
    c = Cookie.from_descriptor({"name": "sid", "value": "S", "partitionKey": "https://example.com"})
    assert c == Cookie(name="sid", value="S")


def test_descriptor_errors_propagate():
    with pytest.raises(TypeError):
        Cookie.from_descriptor({"name": "sid"})
    with pytest.raises(TypeError):
        Cookie.from_descriptor({"name": "sid", "value": "1", "colour": "blue"})


def test_to_playwright_shape():
    c = Cookie(name="a", value="1", domain="example.com", secure=True)
    assert c.to_playwright() == {
        "name": "a",
        "value": "1",
        "domain": "example.com",
        "path": "/",
        "expires": -1,
        "httpOnly": False,
        "secure": True,
        "sameSite": "Lax",
    }


def test_is_expired():
    now = int(time.time())
    assert Cookie(name="a", value="1", expires=now - 10).is_expired()
    assert not Cookie(name="a", value="1", expires=now + 3600).is_expired()
    assert not Cookie(name="a", value="1").is_expired()  # сессионная


# ---------------------------------------------------------------------------
# CookieCollection
# ---------------------------------------------------------------------------
def test_add_same_name_replaces_in_place(collection: CookieCollection):
    collection.add(Cookie(name="a", value="1"))
    collection.add(Cookie(name="b", value="2"))
    collection.add(Cookie(name="a", value="3"))

    assert collection.count() == 2
    assert [c.name for c in collection] == ["a", "b"]
    assert collection.get("a").value == "3"


def test_remove_and_membership(collection: CookieCollection):
    collection.add(Cookie(name="a", value="1"))
    assert "a" in collection and collection.has("a")

    removed = collection.remove("a")
    assert removed is not None and removed.value == "1"
    assert collection.remove("a") is None
    assert not collection


def test_cookie_header(collection: CookieCollection):
    collection.add(Cookie(name="a", value="1"))
    collection.add(Cookie(name="b", value="2"))
    assert collection.to_cookie_header() == "a=1; b=2"

    collection.remove_all()
    assert collection.to_cookie_header() == ""
