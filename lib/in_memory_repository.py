# =============================================================================
# lib/in_memory_repository.py - In-Memory Product Repository
# =============================================================================
# ProductRepository implementation backed by a ProductStore.
#
# Every operation runs under the store lock and hands out copies, so
# callers can only change stored products through update().
# =============================================================================

import dataclasses
import logging

from core.models.product import Product
from core.repositories.product_repository import ProductRepository
from lib.product_store import ProductStore

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    """List-backed product repository."""

    def __init__(self, store: ProductStore):
        self._store = store

    async def get_all(self) -> list[Product]:
        with self._store.lock:
            return [dataclasses.replace(p) for p in self._store.products]

    async def get_by_id(self, product_id: int) -> Product | None:
        with self._store.lock:
            product = self._store.find(product_id)
            return dataclasses.replace(product) if product else None

    async def create(self, product: Product) -> Product:
        with self._store.lock:
            stored = dataclasses.replace(product, id=self._store.allocate_id())
            self._store.products.append(stored)
            created = dataclasses.replace(stored)

        logger.info(f"Created product {created.id}: {created.name}")
        return created

    async def update(self, product: Product) -> bool:
        with self._store.lock:
            existing = self._store.find(product.id)
            if existing is None:
                logger.debug(f"Update skipped, product {product.id} not found")
                return False

            existing.name = product.name
            existing.price = product.price
            existing.description = product.description
            existing.stock = product.stock

        logger.info(f"Updated product {product.id}")
        return True

    async def delete(self, product_id: int) -> bool:
        with self._store.lock:
            existing = self._store.find(product_id)
            if existing is None:
                logger.debug(f"Delete skipped, product {product_id} not found")
                return False
            self._store.products.remove(existing)

        logger.info(f"Deleted product {product_id}")
        return True

    async def count(self) -> int:
        with self._store.lock:
            return len(self._store.products)
