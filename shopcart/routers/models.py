"""
HTTP API Pydantic Models

Request/response bodies for the cart and catalog endpoints.
"""
from typing import Optional

from pydantic import BaseModel

from shopcart.actions import ActionKind
from shopcart.presentation import CartPanelView


class CartActionRequest(BaseModel):
    kind: ActionKind
    id: Optional[int] = None
    confirmed: bool = False  # answer to the clear-cart confirmation


class CartEventRequest(BaseModel):
    """Raw UI event: data-action tag plus the container's data-id."""
    action: Optional[str] = None
    id: Optional[int] = None


class CartActionResponse(BaseModel):
    cart: CartPanelView
    handoff_url: Optional[str] = None
    notice: Optional[str] = None
    auto_close_after: Optional[float] = None  # seconds; UI closes the overlay after this
