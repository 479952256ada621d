# =============================================================================
# core/repositories/product_repository.py - Product Repository Contract
# =============================================================================
# Defined in the core package so business logic never depends on the
# storage technology. The in-memory implementation lives in
# lib/in_memory_repository.py.
#
# Methods are async so a real database backend can await I/O without
# changing callers.
# =============================================================================

from abc import ABC, abstractmethod

from core.models.product import Product


class ProductRepository(ABC):
    """
    Storage access for Product entities.

    Absence is signalled by return values (None / False), never by
    exceptions.
    """

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Return a snapshot of every stored product, in insertion order."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return the product with this id, or None if not found."""

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Store a new product.

        Assigns the next identifier (any id on the input is ignored) and
        returns the stored product with its id populated. Not idempotent.
        """

    @abstractmethod
    async def update(self, product: Product) -> bool:
        """
        Overwrite every mutable field of the product with the same id.

        Returns False, changing nothing, if no product has that id.
        """

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """Remove the product with this id. Returns False if it did not exist."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored products."""
