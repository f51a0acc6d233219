"""Tests for view-model projections and HTML fragments"""
from decimal import Decimal

from shopcart.cart import CartLine
from shopcart.catalog import ProductRecord
from shopcart.presentation import (
    PLACEHOLDER_CART_EMPTY,
    PLACEHOLDER_CATALOG_EMPTY,
    PLACEHOLDER_CATALOG_ERROR,
    PLACEHOLDER_CATALOG_LOADING,
    render_badge,
    render_cart,
    render_catalog,
    render_panel,
    render_total,
)
from shopcart.web.html import badge_fragment, cart_fragment, catalog_fragment

XSS_TITLE = '<script>alert("x")</script>'


def _product(**overrides):
    data = {"id": 1, "title": "Shirt", "price": Decimal("20"), "image": "https://img.test/shirt.png"}
    data.update(overrides)
    return ProductRecord(**data)


def _line(**overrides):
    data = {"id": 1, "title": "Shirt", "price": Decimal("20"), "image": "https://img.test/shirt.png", "qty": 2}
    data.update(overrides)
    return CartLine(**data)


class TestCatalogView:
    def test_entries(self):
        view = render_catalog([_product(), _product(id=2, title="Mug", price=Decimal("1234.5"))])

        assert view.placeholder is None
        assert [e.id for e in view.entries] == [1, 2]
        assert view.entries[1].price == "$1,234.50"
        assert view.entries[0].action == "add-to-cart"

    def test_titles_escaped(self):
        view = render_catalog([_product(title=XSS_TITLE, image='x.png" onerror="alert(1)')])

        entry = view.entries[0]
        assert "<script>" not in entry.title
        assert entry.title == "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"
        assert '"' not in entry.image

    def test_placeholders(self):
        assert render_catalog([]).placeholder == PLACEHOLDER_CATALOG_EMPTY
        assert render_catalog([_product()], loading=True).placeholder == PLACEHOLDER_CATALOG_LOADING

        failed = render_catalog([_product()], error="Failed to fetch products: HTTP 500")
        assert failed.placeholder == PLACEHOLDER_CATALOG_ERROR
        assert failed.error is True
        assert failed.entries == []


class TestCartView:
    def test_items(self):
        view = render_cart([_line(), _line(id=3, title="Backpack", price=Decimal("109.95"), qty=1)])

        item = view.items[0]
        assert item.unit_price == "$20.00"
        assert item.qty == 2
        assert item.amount == "$40.00"
        assert item.actions == ["decrease", "increase"]
        assert view.placeholder is None

    def test_empty_cart_placeholder(self):
        view = render_cart([])
        assert view.items == []
        assert view.placeholder == PLACEHOLDER_CART_EMPTY

    def test_titles_escaped(self):
        view = render_cart([_line(title=XSS_TITLE)])
        assert "<" not in view.items[0].title

    def test_badge(self):
        assert render_badge([]).visible is False
        assert render_badge([]).count == 0

        badge = render_badge([_line(qty=2), _line(id=2, qty=3)])
        assert badge.visible is True
        assert badge.count == 5

    def test_total(self):
        assert render_total([]) == "$0.00"
        assert render_total([_line(qty=2), _line(id=3, price=Decimal("109.95"), qty=1)]) == "$149.95"

    def test_panel(self):
        panel = render_panel([_line()], is_open=True)
        assert panel.is_open is True
        assert panel.badge.count == 2
        assert panel.total == "$40.00"


class TestHtmlFragments:
    def test_catalog_fragment(self):
        html = catalog_fragment(render_catalog([_product(title=XSS_TITLE)]))

        assert 'data-id="1"' in html
        assert 'data-action="add-to-cart"' in html
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_catalog_placeholder_fragment(self):
        html = catalog_fragment(render_catalog([], error="boom"))
        assert html == f'<div class="loading">{PLACEHOLDER_CATALOG_ERROR}</div>'

    def test_cart_fragment(self):
        html = cart_fragment(render_panel([_line(title=XSS_TITLE)]))

        assert 'class="cart-item" data-id="1"' in html
        assert 'data-action="decrease"' in html
        assert 'data-action="increase"' in html
        assert '<span class="qty">2</span>' in html
        assert "<script>" not in html

    def test_empty_cart_fragment(self):
        html = cart_fragment(render_panel([]))
        assert html == f'<div class="cart-empty">{PLACEHOLDER_CART_EMPTY}</div>'

    def test_badge_fragment(self):
        assert badge_fragment(render_panel([])) == '<span class="cart-qty">0</span>'
        assert badge_fragment(render_panel([_line()])) == '<span class="cart-qty visible">2</span>'
