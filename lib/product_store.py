# =============================================================================
# lib/product_store.py - In-Memory Product Store
# =============================================================================
# Process-wide storage for products: an ordered list plus the next-id
# counter, both guarded by one lock.
#
# The store is bound as a singleton in the composition root and is only
# touched by InMemoryProductRepository. Nothing survives a restart.
# =============================================================================

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from decimal import Decimal

from core.models.product import Product


# -----------------------------------------------------------------------------
# Seed Data
# -----------------------------------------------------------------------------
# Loaded once when the store is created; the counter continues at 4.

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=Decimal("999.99"), description="Laptop de alto rendimiento", stock=10),
    Product(id=2, name="Mouse", price=Decimal("29.99"), description="Mouse inalámbrico", stock=50),
    Product(id=3, name="Teclado", price=Decimal("49.99"), description="Teclado mecánico", stock=30),
)


@dataclass
class ProductStore:
    """
    Mutable product storage shared across requests.

    Attributes:
        products: Stored entities in insertion order
        next_id: Identifier the next created product receives
        lock: Held for every read and write of products/next_id
    """
    products: list[Product] = field(default_factory=list)
    next_id: int = 1
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def seeded(cls) -> "ProductStore":
        """Create a store holding the three seed products."""
        products = [
            Product(p.id, p.name, p.price, p.description, p.stock)
            for p in SEED_PRODUCTS
        ]
        return cls(products=products, next_id=max(p.id for p in products) + 1)

    def allocate_id(self) -> int:
        """Take the next identifier. Caller must hold the lock."""
        product_id = self.next_id
        self.next_id += 1
        return product_id

    def find(self, product_id: int) -> Product | None:
        """Linear scan by id. Caller must hold the lock."""
        return next((p for p in self.products if p.id == product_id), None)
