# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Orchestrates repository calls and maps entities to response schemas.
# Separates HTTP concerns from storage.
#
# - ProductService: the contract route handlers depend on
# - CatalogProductService: the implementation bound in the composition root
# =============================================================================

import logging
from abc import ABC, abstractmethod

from core.models.product import Product, ProductCreate, ProductResponse, ProductUpdate
from core.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(ABC):
    """
    Business operations on products.

    Absence is reported through return values: None for reads, False for
    updates and deletes that found nothing.
    """

    @abstractmethod
    async def get_all_products(self) -> list[ProductResponse]:
        """Return every product, in store order."""

    @abstractmethod
    async def get_product_by_id(self, product_id: int) -> ProductResponse | None:
        """Return one product, or None if it does not exist."""

    @abstractmethod
    async def create_product(self, request: ProductCreate) -> ProductResponse:
        """Create a product and return it with its assigned id."""

    @abstractmethod
    async def update_product(self, product_id: int, request: ProductUpdate) -> bool:
        """Overwrite a product. Returns False (no error) if it does not exist."""

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        """Delete a product. Returns False (no error) if it does not exist."""


class CatalogProductService(ProductService):
    """
    ProductService backed by a ProductRepository.

    Holds no state besides the repository; every change to the catalog
    goes through it.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_all_products(self) -> list[ProductResponse]:
        products = await self._repository.get_all()
        logger.debug(f"Listing {len(products)} products")
        return [ProductResponse.from_entity(p) for p in products]

    async def get_product_by_id(self, product_id: int) -> ProductResponse | None:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            logger.debug(f"Product not found: {product_id}")
            return None

        return ProductResponse.from_entity(product)

    async def create_product(self, request: ProductCreate) -> ProductResponse:
        logger.info(f"Creating product: {request.name}")

        # id stays unset, the repository assigns it
        product = Product(
            name=request.name,
            price=request.price,
            description=request.description,
            stock=request.stock,
        )

        created = await self._repository.create(product)
        return ProductResponse.from_entity(created)

    async def update_product(self, product_id: int, request: ProductUpdate) -> bool:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            logger.debug(f"Nothing to update, product not found: {product_id}")
            return False

        product.name = request.name
        product.price = request.price
        product.description = request.description
        product.stock = request.stock

        return await self._repository.update(product)

    async def delete_product(self, product_id: int) -> bool:
        return await self._repository.delete(product_id)
