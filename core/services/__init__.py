# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import CatalogProductService, ProductService

__all__ = [
    "CatalogProductService",
    "ProductService",
]
