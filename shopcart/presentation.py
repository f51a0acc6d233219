"""
Presentation Layer

Pure projections from catalog/cart state to view models. Nothing here
touches a UI toolkit; adapters (HTML fragments, JSON routes) consume the
returned models.

Every catalog-sourced string is HTML-escaped before it is placed in a
view model.
"""
import html
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel

from shopcart.actions import TAG_ADD_TO_CART, TAG_DECREASE, TAG_INCREASE
from shopcart.cart.models import CartLine
from shopcart.catalog.models import ProductRecord
from shopcart.config import DISPLAY_CURRENCY
from shopcart.errors import ERROR_CART_EMPTY, ERROR_CATALOG_UNAVAILABLE
from shopcart.services.money import format_money, total

PLACEHOLDER_CATALOG_LOADING = "Loading products..."
PLACEHOLDER_CATALOG_EMPTY = "No products found."
PLACEHOLDER_CATALOG_ERROR = ERROR_CATALOG_UNAVAILABLE
PLACEHOLDER_CART_EMPTY = ERROR_CART_EMPTY


# ==================== VIEW MODELS ====================

class CatalogEntryView(BaseModel):
    id: int
    title: str  # escaped
    price: str
    image: str  # escaped
    action: str = TAG_ADD_TO_CART


class CatalogView(BaseModel):
    entries: list[CatalogEntryView] = []
    placeholder: Optional[str] = None
    error: bool = False


class CartItemView(BaseModel):
    id: int
    title: str  # escaped
    image: str  # escaped
    unit_price: str
    qty: int
    amount: str
    actions: list[str] = [TAG_DECREASE, TAG_INCREASE]


class CartView(BaseModel):
    items: list[CartItemView] = []
    placeholder: Optional[str] = None


class BadgeView(BaseModel):
    visible: bool
    count: int


class CartPanelView(BaseModel):
    """Everything the cart region of the page needs."""
    cart: CartView
    badge: BadgeView
    total: str
    is_open: bool = False


# ==================== PROJECTIONS ====================

def escape_text(value: str) -> str:
    """Escape text for insertion into markup (quotes included, for attributes)."""
    return html.escape(value, quote=True)


def format_price(value) -> str:
    return format_money(value, DISPLAY_CURRENCY)


def render_catalog(
    products: Iterable[ProductRecord],
    loading: bool = False,
    error: Optional[str] = None,
) -> CatalogView:
    """
    Catalog grid.

    A load in progress or a failed load shows a placeholder; an empty
    catalog shows its own placeholder.
    """
    if loading:
        return CatalogView(placeholder=PLACEHOLDER_CATALOG_LOADING)
    if error:
        return CatalogView(placeholder=PLACEHOLDER_CATALOG_ERROR, error=True)

    entries = [
        CatalogEntryView(
            id=product.id,
            title=escape_text(product.title),
            price=format_price(product.price),
            image=escape_text(product.image),
        )
        for product in products
    ]
    if not entries:
        return CatalogView(placeholder=PLACEHOLDER_CATALOG_EMPTY)
    return CatalogView(entries=entries)


def render_cart(lines: Sequence[CartLine]) -> CartView:
    """Cart item list, or the empty placeholder."""
    if not lines:
        return CartView(placeholder=PLACEHOLDER_CART_EMPTY)

    return CartView(items=[
        CartItemView(
            id=line.id,
            title=escape_text(line.title),
            image=escape_text(line.image),
            unit_price=format_price(line.price),
            qty=line.qty,
            amount=format_price(line.amount),
        )
        for line in lines
    ])


def render_badge(lines: Sequence[CartLine]) -> BadgeView:
    count = sum(line.qty for line in lines)
    return BadgeView(visible=count > 0, count=count)


def render_total(lines: Sequence[CartLine]) -> str:
    return format_price(total(line.amount for line in lines))


def render_panel(lines: Sequence[CartLine], is_open: bool = False) -> CartPanelView:
    """Cart view, badge and total in one model."""
    return CartPanelView(
        cart=render_cart(lines),
        badge=render_badge(lines),
        total=render_total(lines),
        is_open=is_open,
    )
