"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from shopcart.catalog.models import ProductRecord
from shopcart.services.money import to_decimal, to_float, multiply


class CartState(str, Enum):
    """Visibility-relevant cart state."""
    EMPTY = "empty"
    NONEMPTY = "nonempty"


@dataclass(frozen=True)
class CartLine:
    """
    Single line in the cart.

    Title, price and image are copied from the product when the line is
    created; later catalog changes do not touch existing lines.
    """
    id: int
    title: str
    price: Decimal
    image: str
    qty: int = 1

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    @classmethod
    def from_product(cls, product: ProductRecord) -> "CartLine":
        """New line with quantity 1 and the product's current fields."""
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            image=product.image,
            qty=1,
        )

    @property
    def amount(self) -> Decimal:
        """Line amount (price x quantity)."""
        return multiply(self.price, self.qty)

    def with_qty(self, qty: int) -> "CartLine":
        return replace(self, qty=qty)

    def to_dict(self) -> dict:
        """Convert to the persisted layout."""
        return {
            "id": self.id,
            "title": self.title,
            "price": to_float(self.price),
            "image": self.image,
            "qty": self.qty,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        """Create from the persisted layout."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            price=to_decimal(data["price"]),
            image=data["image"],
            qty=int(data["qty"]),
        )
