"""Cart package: line models, store, and slot persistence."""
from .models import CartLine, CartState
from .service import CartStore
from .storage import CartPersistence, FileSlotStorage, MemorySlotStorage, SlotStorage

__all__ = [
    "CartLine",
    "CartState",
    "CartStore",
    "CartPersistence",
    "FileSlotStorage",
    "MemorySlotStorage",
    "SlotStorage",
]
