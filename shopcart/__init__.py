"""
shopcart - single-user shopping cart manager

This package contains:
- catalog: remote product catalog cache (httpx)
- cart: cart store, line models and slot persistence
- presentation: view models for catalog, cart panel, badge and totals
- controller: action dispatch, overlay handling, checkout handoff
- orders: order message formatting and handoff URL
- app: application wiring (owned state objects)

Note: Imports are lazy so that importing a leaf module (e.g. the money
helpers) does not pull in httpx or FastAPI.
"""

__all__ = [
    "CartStore",
    "CatalogCache",
    "InteractionController",
    "Storefront",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from shopcart.cart import CartStore
        return CartStore
    elif name == "CatalogCache":
        from shopcart.catalog import CatalogCache
        return CatalogCache
    elif name == "InteractionController":
        from shopcart.controller import InteractionController
        return InteractionController
    elif name == "Storefront":
        from shopcart.app import Storefront
        return Storefront
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
