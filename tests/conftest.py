"""Pytest configuration and fixtures"""
import asyncio
import os
from unittest.mock import Mock

import httpx
import pytest

# Keep test runs away from the real endpoint and the working directory
os.environ.setdefault("CATALOG_API_URL", "https://catalog.test/products")
os.environ.setdefault("CART_STORAGE_DIR", "/tmp/shopcart-test-storage")

from shopcart.app import Storefront
from shopcart.cart import CartPersistence, CartStore, MemorySlotStorage
from shopcart.catalog import CatalogCache
from shopcart.controller import InteractionController

CATALOG_URL = "https://catalog.test/products"


def catalog_transport(payload=None, status_code: int = 200) -> httpx.MockTransport:
    """Mock transport answering every request with the given payload/status."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload if payload is not None else [])
    return httpx.MockTransport(handler)


def make_catalog(payload=None, status_code: int = 200) -> CatalogCache:
    client = httpx.AsyncClient(transport=catalog_transport(payload, status_code))
    return CatalogCache(CATALOG_URL, client=client)


@pytest.fixture
def sample_products():
    """Catalog records as served by the remote endpoint"""
    return [
        {
            "id": 1,
            "title": "Shirt",
            "price": 20.0,
            "description": "Cotton shirt",
            "category": "men's clothing",
            "image": "https://img.test/shirt.png",
            "rating": {"rate": 4.1, "count": 259},
        },
        {
            "id": 2,
            "title": "Mug <b>bold</b>",
            "price": 7.5,
            "description": "Ceramic mug",
            "category": "kitchen",
            "image": "https://img.test/mug.png",
        },
        {
            "id": 3,
            "title": "Backpack",
            "price": 109.95,
            "description": "Fits 15 inch laptops",
            "category": "bags",
            "image": "https://img.test/backpack.png",
        },
    ]


@pytest.fixture
def catalog(sample_products):
    """Catalog cache already loaded with sample_products"""
    cache = make_catalog(sample_products)
    asyncio.run(cache.load())
    return cache


@pytest.fixture
def store(catalog):
    return CartStore(catalog)


@pytest.fixture
def slot_storage():
    return MemorySlotStorage()


@pytest.fixture
def persistence(slot_storage):
    return CartPersistence(slot_storage, "online-store")


@pytest.fixture
def ports():
    """UI ports as mocks (confirm accepts by default)"""
    return Mock(
        confirm=Mock(return_value=True),
        alert=Mock(),
        open_uri=Mock(),
        on_render=Mock(),
        schedule=Mock(),
    )


@pytest.fixture
def controller(store, persistence, catalog, ports):
    return InteractionController(
        store,
        persistence,
        catalog,
        confirm=ports.confirm,
        alert=ports.alert,
        open_uri=ports.open_uri,
        on_render=ports.on_render,
        schedule=ports.schedule,
        auto_close_delay=0.3,
        phone="+15550001111",
        handoff_base_url="https://wa.me/",
    )


@pytest.fixture
def storefront(sample_products, slot_storage):
    """Storefront with an in-memory slot and a mocked catalog endpoint"""
    client = httpx.AsyncClient(transport=catalog_transport(sample_products))
    return Storefront.create(catalog_url=CATALOG_URL, storage=slot_storage, client=client)
