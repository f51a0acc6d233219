"""HTTP adapter routers.

Combines the catalog, cart and fragment routers.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .catalog import router as catalog_router
from .fragments import router as fragments_router

router = APIRouter()

router.include_router(catalog_router)
router.include_router(cart_router)
router.include_router(fragments_router)

__all__ = ["router"]
