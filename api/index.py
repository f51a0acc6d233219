"""
shopcart - Main FastAPI Application

Single entry point for the storefront API and HTML fragments.

Run locally:
    uvicorn api.index:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopcart.app import Storefront
from shopcart.logging import get_logger
from shopcart.routers import router as shop_router

logger = get_logger(__name__)


def create_app(storefront: Optional[Storefront] = None) -> FastAPI:
    """
    Build the application.

    Args:
        storefront: Pre-built state (tests); created from configuration
            at start-up when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        # Startup: restore the cart, then fetch the catalog once
        if getattr(app.state, "storefront", None) is None:
            app.state.storefront = Storefront.create()
        catalog_view = await app.state.storefront.controller().load_catalog()
        if catalog_view.error:
            logger.warning("Starting with an unavailable catalog")
        yield
        # Shutdown: nothing to release, every mutation is already saved

    app = FastAPI(
        title="shopcart",
        description="Shopping cart with catalog cache and order handoff",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.storefront = storefront

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(shop_router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "shopcart"}

    return app


app = create_app()
