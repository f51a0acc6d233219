"""
Order Formatter

Turns a cart snapshot into the plain-text order message sent through the
handoff channel, and builds the handoff URL around it.
"""
from typing import Sequence
from urllib.parse import quote

from shopcart.cart.models import CartLine
from shopcart.config import DISPLAY_CURRENCY, ORDER_HANDOFF_BASE_URL, ORDER_PHONE_NUMBER
from shopcart.errors import EmptyCartError
from shopcart.services.money import format_money, total

ORDER_PREAMBLE = "Hello, I would like to place an order:\n\n"


def format_order(lines: Sequence[CartLine]) -> str:
    """
    Format the order message.

    Raises:
        EmptyCartError: no lines; nothing may be handed off
    """
    if not lines:
        raise EmptyCartError()

    message = ORDER_PREAMBLE
    for line in lines:
        message += f"{line.qty} x {line.title} - {format_money(line.amount, DISPLAY_CURRENCY)}\n"
    message += f"\nTotal: {format_money(total(line.amount for line in lines), DISPLAY_CURRENCY)}"
    return message


def build_handoff_url(
    message: str,
    phone: str = ORDER_PHONE_NUMBER,
    base_url: str = ORDER_HANDOFF_BASE_URL,
) -> str:
    """{base}{phone}?text={message}, with the message fully percent-encoded."""
    return f"{base_url}{phone}?text={quote(message, safe='')}"
