"""HTML fragment endpoints for the storefront page."""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from shopcart.app import Storefront
from shopcart.web.html import badge_fragment, cart_fragment, catalog_fragment
from .deps import get_storefront

router = APIRouter(prefix="/fragments", tags=["fragments"])


@router.get("/catalog", response_class=HTMLResponse)
async def catalog_html(storefront: Storefront = Depends(get_storefront)):
    return catalog_fragment(storefront.controller().render_catalog())


@router.get("/cart", response_class=HTMLResponse)
async def cart_html(storefront: Storefront = Depends(get_storefront)):
    return cart_fragment(storefront.controller().render())


@router.get("/badge", response_class=HTMLResponse)
async def badge_html(storefront: Storefront = Depends(get_storefront)):
    return badge_fragment(storefront.controller().render())
