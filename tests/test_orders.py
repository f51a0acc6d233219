"""Tests for order formatting and handoff URL"""
from decimal import Decimal
from urllib.parse import unquote, urlsplit

import pytest

from shopcart.cart import CartLine
from shopcart.errors import EmptyCartError
from shopcart.orders import build_handoff_url, format_order


@pytest.fixture
def lines():
    return [
        CartLine(id=1, title="Shirt", price=Decimal("20.00"), image="s.png", qty=2),
        CartLine(id=3, title="Backpack & Co", price=Decimal("109.95"), image="b.png", qty=1),
    ]


def test_format_order(lines):
    message = format_order(lines)

    assert message == (
        "Hello, I would like to place an order:\n\n"
        "2 x Shirt - $40.00\n"
        "1 x Backpack & Co - $109.95\n"
        "\nTotal: $149.95"
    )


def test_format_order_uses_raw_titles():
    """Plain text: titles are not HTML-escaped"""
    message = format_order([CartLine(id=1, title="<Tee>", price=Decimal("5"), image="t.png")])
    assert "1 x <Tee> - $5.00" in message


def test_format_empty_cart():
    with pytest.raises(EmptyCartError):
        format_order([])


def test_handoff_url(lines):
    message = format_order(lines)

    url = build_handoff_url(message, phone="+15550001111", base_url="https://wa.me/")

    parts = urlsplit(url)
    assert parts.scheme == "https"
    assert parts.netloc == "wa.me"
    assert parts.path == "/+15550001111"
    assert parts.query.startswith("text=Hello%2C%20I%20would")
    # Reserved characters in the message never leak into the query
    assert "&" not in parts.query
    assert "\n" not in url
    assert unquote(parts.query[len("text="):]) == message
