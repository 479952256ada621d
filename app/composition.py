# =============================================================================
# app/composition.py - Composition Root
# =============================================================================
# The single place where abstractions are bound to implementations.
#
#   ProductStore       -> seeded in-memory store     (singleton)
#   ProductRepository  -> InMemoryProductRepository  (scoped, per request)
#   ProductService     -> CatalogProductService      (scoped, per request)
#
# build_container() validates the graph, so the app refuses to start with a
# missing or circular binding.
# =============================================================================

import logging

from app.config import Settings
from core.wiring import add_application_layer
from lib.container import Container, ServiceCollection
from lib.wiring import add_infrastructure_layer

logger = logging.getLogger(__name__)


def build_container(settings: Settings) -> Container:
    """
    Register every layer and build the validated container.

    Args:
        settings: Application settings (controls store seeding)

    Returns:
        Container ready to create per-request scopes

    Raises:
        DependencyResolutionError: If the bindings are incomplete or cyclic
    """
    services = ServiceCollection()
    add_infrastructure_layer(services, seed=settings.SEED_PRODUCTS)
    add_application_layer(services)

    container = services.build()
    logger.info(f"Composition root ready (seed_products={settings.SEED_PRODUCTS})")
    return container
