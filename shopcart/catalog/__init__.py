"""Catalog package: product records and the cache over the remote source."""
from .models import ProductRecord
from .service import CatalogCache

__all__ = [
    "ProductRecord",
    "CatalogCache",
]
