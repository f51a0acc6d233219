"""Shared dependencies for routers."""

from fastapi import HTTPException, Request

from shopcart.app import Storefront


def get_storefront(request: Request) -> Storefront:
    """Storefront created at application start-up."""
    storefront = getattr(request.app.state, "storefront", None)
    if storefront is None:
        raise HTTPException(status_code=503, detail="Storefront not initialised")
    return storefront
