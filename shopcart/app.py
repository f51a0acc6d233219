"""
Application wiring

Builds the explicitly owned state objects (catalog cache, cart store,
persistence) once at start-up. Adapters receive the Storefront instead
of reaching for module-level globals.
"""
from pathlib import Path
from typing import Optional

import httpx

from shopcart.cart.service import CartStore
from shopcart.cart.storage import CartPersistence, FileSlotStorage, SlotStorage
from shopcart.catalog.service import CatalogCache
from shopcart.config import CART_STORAGE_DIR, CART_STORAGE_KEY, CATALOG_API_URL
from shopcart.controller import InteractionController, OverlayState
from shopcart.logging import get_logger

logger = get_logger(__name__)


class Storefront:
    """Owned application state: catalog cache, cart store and persistence."""

    def __init__(
        self,
        catalog: CatalogCache,
        persistence: CartPersistence,
    ):
        self.catalog = catalog
        self.persistence = persistence
        self.store = CartStore(catalog, persistence.load())
        self.overlay = OverlayState()
        logger.info(f"Cart restored with {len(self.store)} lines")

    @classmethod
    def create(
        cls,
        catalog_url: str = CATALOG_API_URL,
        storage: Optional[SlotStorage] = None,
        storage_dir: Path = CART_STORAGE_DIR,
        storage_key: str = CART_STORAGE_KEY,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "Storefront":
        """Build a storefront from configuration (file-backed slot by default)."""
        if storage is None:
            storage = FileSlotStorage(storage_dir)
        return cls(
            catalog=CatalogCache(catalog_url, client=client),
            persistence=CartPersistence(storage, storage_key),
        )

    def controller(self, **ports) -> InteractionController:
        """
        Controller bound to this storefront.

        Controllers are cheap; adapters may build one per request with
        request-specific ports. They all share the storefront's overlay.
        """
        return InteractionController(
            self.store,
            self.persistence,
            self.catalog,
            overlay=self.overlay,
            **ports,
        )
