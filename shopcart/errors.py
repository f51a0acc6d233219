"""
Error Taxonomy

Centralized error messages and exception types. Every error here is
recovered locally; none of them is fatal to the application.
"""

# User-facing messages
ERROR_CART_EMPTY = "Your cart is empty."
ERROR_CATALOG_UNAVAILABLE = "Failed to load products."
CONFIRM_CLEAR_CART = "Are you sure you want to clear the cart?"

# Internal messages
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATALOG_FETCH = "Failed to fetch products"
ERROR_PERSISTED_STATE = "Persisted cart is malformed"


class ShopError(Exception):
    """Base class for shopcart errors."""


class CatalogFetchError(ShopError):
    """Catalog request failed (transport, non-2xx status, or bad payload)."""

    def __init__(self, message: str = ERROR_CATALOG_FETCH, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProductNotFound(ShopError, LookupError):
    """Identifier does not resolve in the catalog cache."""

    def __init__(self, product_id):
        super().__init__(f"{ERROR_PRODUCT_NOT_FOUND}: {product_id}")
        self.product_id = product_id


class MalformedPersistedState(ShopError, ValueError):
    """Durable slot content does not match the cart layout."""


class EmptyCartError(ShopError):
    """Order handoff attempted with an empty cart."""

    def __init__(self, message: str = ERROR_CART_EMPTY):
        super().__init__(message)
