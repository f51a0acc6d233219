"""
User actions

The UI adapter turns raw input (a clicked element's action tag plus the
id of its nearest product/cart-item container) into an Action; the
controller consumes Actions only.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Action tags carried by rendered affordances
TAG_ADD_TO_CART = "add-to-cart"
TAG_INCREASE = "increase"
TAG_DECREASE = "decrease"


class ActionKind(str, Enum):
    """Cart actions understood by the controller."""
    ADD = "add"
    INCREASE = "increase"
    DECREASE = "decrease"
    REMOVE = "remove"
    CLEAR = "clear"
    CHECKOUT = "checkout"


# Kinds that target a single line and need an id
ITEM_KINDS = frozenset({ActionKind.ADD, ActionKind.INCREASE, ActionKind.DECREASE, ActionKind.REMOVE})

_TAG_TO_KIND = {
    TAG_ADD_TO_CART: ActionKind.ADD,
    TAG_INCREASE: ActionKind.INCREASE,
    TAG_DECREASE: ActionKind.DECREASE,
}


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    id: Optional[int] = None

    def __post_init__(self):
        if self.kind in ITEM_KINDS and self.id is None:
            raise ValueError(f"Action '{self.kind.value}' requires a product id")

    @classmethod
    def from_tag(cls, tag: Optional[str], product_id: Optional[int]) -> Optional["Action"]:
        """
        Map a rendered action tag to an Action.

        Returns None for unknown tags or a missing id, which callers
        treat as "nothing to do".
        """
        kind = _TAG_TO_KIND.get(tag or "")
        if kind is None or product_id is None:
            return None
        return cls(kind=kind, id=product_id)
