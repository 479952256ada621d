# =============================================================================
# core/wiring.py - Application Layer Registration
# =============================================================================
# Binds the service contracts of the core package to their implementations.
# Called from the composition root (app/composition.py).
# =============================================================================

from core.services.product_service import CatalogProductService, ProductService
from lib.container import ServiceCollection


def add_application_layer(services: ServiceCollection) -> ServiceCollection:
    """
    Register application services.

    ProductService is scoped: one instance per request, sharing that
    request's repository.
    """
    services.add_scoped(ProductService, CatalogProductService)
    return services
