"""
HTML fragments

Turns view models into the markup the storefront page swaps in. Text in
the view models is already escaped, so it is inserted as-is here.
Affordances carry data-id on the container and data-action on the
control, which is what the page's click handler reads back.
"""
from shopcart.presentation import CartPanelView, CatalogView


def _placeholder(css_class: str, text: str) -> str:
    return f'<div class="{css_class}">{text}</div>'


def catalog_fragment(view: CatalogView) -> str:
    """Product grid, or the loading/empty/error placeholder."""
    if view.placeholder:
        return _placeholder("loading", view.placeholder)

    return "".join(
        f'<div class="product" data-id="{entry.id}">'
        f'<img src="{entry.image}" alt="{entry.title}" />'
        f"<h3>{entry.title}</h3>"
        f"<p>{entry.price}</p>"
        f'<button data-action="{entry.action}">Add to Cart</button>'
        f"</div>"
        for entry in view.entries
    )


def cart_fragment(panel: CartPanelView) -> str:
    """Cart body (items or empty placeholder)."""
    cart = panel.cart
    if cart.placeholder:
        return _placeholder("cart-empty", cart.placeholder)

    parts = []
    for item in cart.items:
        decrease, increase = item.actions
        parts.append(
            f'<div class="cart-item" data-id="{item.id}">'
            f'<img src="{item.image}" alt="{item.title}" />'
            f'<div class="cart-item-detail">'
            f"<h3>{item.title}</h3>"
            f"<h5>{item.unit_price}</h5>"
            f'<div class="cart-item-amount">'
            f'<i class="bi bi-dash-lg" data-action="{decrease}"></i>'
            f'<span class="qty">{item.qty}</span>'
            f'<i class="bi bi-plus-lg" data-action="{increase}"></i>'
            f'<span class="cart-item-price">{item.amount}</span>'
            f"</div></div></div>"
        )
    return "".join(parts)


def badge_fragment(panel: CartPanelView) -> str:
    visible = " visible" if panel.badge.visible else ""
    return f'<span class="cart-qty{visible}">{panel.badge.count}</span>'
