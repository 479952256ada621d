# =============================================================================
# core/repositories/ - Storage Contracts
# =============================================================================
# Abstract repositories the service layer depends on.
# Implementations live in lib/ (infrastructure) and are bound in the
# composition root.
# =============================================================================

from .product_repository import ProductRepository

__all__ = [
    "ProductRepository",
]
