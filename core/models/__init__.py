# =============================================================================
# core/models/ - Domain Entity & Pydantic Schemas
# =============================================================================
# This package contains:
# - product.py: the Product entity and its transfer schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .product import (
    Price,
    Product,
    ProductBase,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    "Price",
    "Product",
    "ProductBase",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
]
