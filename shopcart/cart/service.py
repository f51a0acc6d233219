"""
Cart Store

Owns the ordered line sequence and every mutation of it. Operations are
synchronous and complete before the next event is handled, so no locking
is needed.
"""
from decimal import Decimal
from typing import Iterable, Optional

from shopcart.catalog.service import CatalogCache
from shopcart.logging import get_logger, sanitize_string_for_logging
from shopcart.services.money import total
from .models import CartLine, CartState

logger = get_logger(__name__)


class CartStore:
    """
    Ordered collection of cart lines keyed by product id.

    Invariants:
    - at most one line per product id
    - every line has qty >= 1; a line that would reach 0 is removed

    Every mutator returns the resulting CartState so callers can react to
    the cart becoming empty.
    """

    def __init__(self, catalog: CatalogCache, lines: Iterable[CartLine] = ()):
        self._catalog = catalog
        self._lines: list[CartLine] = []
        self.replace(lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def state(self) -> CartState:
        return CartState.NONEMPTY if self._lines else CartState.EMPTY

    def _position(self, product_id: int) -> Optional[int]:
        for i, line in enumerate(self._lines):
            if line.id == product_id:
                return i
        return None

    def get(self, product_id: int) -> Optional[CartLine]:
        """Line for product_id, or None."""
        pos = self._position(product_id)
        return None if pos is None else self._lines[pos]

    # ==================== MUTATIONS ====================

    def add(self, product_id: int) -> CartState:
        """
        Add one unit of a catalog product.

        Raises:
            ProductNotFound: product_id is not in the catalog cache (cart unchanged)
        """
        product = self._catalog.lookup(product_id)

        pos = self._position(product_id)
        if pos is not None:
            # Existing lines keep the price they were added at
            self._lines[pos] = self._lines[pos].with_qty(self._lines[pos].qty + 1)
            return self.state

        self._lines.append(CartLine.from_product(product))
        logger.debug(f"Added {product_id} ({sanitize_string_for_logging(product.title)}) to cart")
        return self.state

    def increase(self, product_id: int) -> CartState:
        """Increment quantity; no-op if the line is absent."""
        pos = self._position(product_id)
        if pos is not None:
            self._lines[pos] = self._lines[pos].with_qty(self._lines[pos].qty + 1)
        return self.state

    def decrease(self, product_id: int) -> CartState:
        """Decrement quantity, removing the line when it reaches 0."""
        pos = self._position(product_id)
        if pos is None:
            return self.state

        line = self._lines[pos]
        if line.qty - 1 <= 0:
            return self.remove(product_id)

        self._lines[pos] = line.with_qty(line.qty - 1)
        return self.state

    def remove(self, product_id: int) -> CartState:
        """Delete the line for product_id if present."""
        self._lines = [line for line in self._lines if line.id != product_id]
        return self.state

    def clear(self) -> CartState:
        """Empty the cart. Confirmation is the caller's responsibility."""
        self._lines = []
        return self.state

    def replace(self, lines: Iterable[CartLine]) -> CartState:
        """
        Replace the whole sequence (used when restoring persisted state).

        Raises:
            ValueError: duplicate ids or a quantity below 1
        """
        new_lines = list(lines)
        seen: set[int] = set()
        for line in new_lines:
            if line.qty < 1:
                raise ValueError(f"Cart line {line.id} has quantity {line.qty}")
            if line.id in seen:
                raise ValueError(f"Duplicate cart line for product {line.id}")
            seen.add(line.id)
        self._lines = new_lines
        return self.state

    # ==================== DERIVED ====================

    def total_quantity(self) -> int:
        """Sum of all line quantities."""
        return sum(line.qty for line in self._lines)

    def total_amount(self) -> Decimal:
        """Sum of price x qty over all lines."""
        return total(line.amount for line in self._lines)

    def snapshot(self) -> tuple[CartLine, ...]:
        """Immutable copy of the current lines, in insertion order."""
        return tuple(self._lines)
