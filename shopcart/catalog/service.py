"""
Catalog Cache

Holds the most recently fetched product records. The cart only reads
from it; a successful load replaces the whole set, a failed load leaves
the previous set in place.
"""
from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from shopcart.config import CATALOG_API_URL, CATALOG_TIMEOUT
from shopcart.errors import CatalogFetchError, ProductNotFound, ERROR_CATALOG_FETCH
from shopcart.logging import get_logger
from .models import ProductRecord

logger = get_logger(__name__)

_records_adapter = TypeAdapter(list[ProductRecord])


class CatalogCache:
    """
    Cache over the remote product catalog.

    Attributes:
        loading: True while a load is awaiting the network
        error: message of the last failed load, cleared on success
    """

    def __init__(
        self,
        url: str = CATALOG_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = CATALOG_TIMEOUT,
    ):
        """
        Args:
            url: Catalog endpoint returning a JSON list of products
            client: Optional shared httpx client (a short-lived one is used otherwise)
            timeout: Request timeout in seconds when no client is given
        """
        self.url = url
        self._client = client
        self._timeout = timeout
        self._products: tuple[ProductRecord, ...] = ()
        self._index: dict[int, ProductRecord] = {}
        self.loading = False
        self.error: Optional[str] = None

    @property
    def products(self) -> tuple[ProductRecord, ...]:
        """Current cached records."""
        return self._products

    async def load(self) -> list[ProductRecord]:
        """
        Fetch the catalog and replace the cached set.

        Raises:
            CatalogFetchError: transport failure, non-2xx status or bad payload.
                The cache keeps its previous contents.
        """
        self.loading = True
        try:
            payload = await self._fetch()
            products = self._parse(payload)
        except CatalogFetchError as e:
            self.error = str(e)
            logger.warning(f"Catalog load failed: {e}")
            raise
        finally:
            self.loading = False

        index: dict[int, ProductRecord] = {}
        for product in products:
            if product.id in index:
                logger.warning(f"Duplicate product id {product.id} in catalog, keeping first")
                continue
            index[product.id] = product

        self._products = tuple(index.values())
        self._index = index
        self.error = None
        logger.info(f"Catalog loaded: {len(self._products)} products")
        return list(self._products)

    def lookup(self, product_id: int) -> ProductRecord:
        """Resolve a product by id, raising ProductNotFound when absent."""
        try:
            return self._index[product_id]
        except KeyError:
            raise ProductNotFound(product_id) from None

    async def _fetch(self):
        try:
            if self._client is not None:
                response = await self._client.get(self.url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self.url)
        except httpx.HTTPError as e:
            raise CatalogFetchError(f"{ERROR_CATALOG_FETCH}: {e.__class__.__name__}") from e

        if not response.is_success:
            raise CatalogFetchError(
                f"{ERROR_CATALOG_FETCH}: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise CatalogFetchError(f"{ERROR_CATALOG_FETCH}: invalid JSON") from e

    @staticmethod
    def _parse(payload) -> list[ProductRecord]:
        try:
            return _records_adapter.validate_python(payload)
        except ValidationError as e:
            raise CatalogFetchError(
                f"{ERROR_CATALOG_FETCH}: unexpected payload ({e.error_count()} errors)"
            ) from e
