"""Catalog Router"""
from fastapi import APIRouter, Depends

from shopcart.app import Storefront
from shopcart.presentation import CatalogView
from .deps import get_storefront

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/catalog", response_model=CatalogView)
async def get_catalog(storefront: Storefront = Depends(get_storefront)):
    """Catalog view from the cache (placeholder while loading or after a failure)."""
    return storefront.controller().render_catalog()


@router.post("/catalog/reload", response_model=CatalogView)
async def reload_catalog(storefront: Storefront = Depends(get_storefront)):
    """Fetch the catalog again. A failed fetch keeps the cached products."""
    return await storefront.controller().load_catalog()
