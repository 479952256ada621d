# =============================================================================
# lib/wiring.py - Infrastructure Layer Registration
# =============================================================================
# Binds storage contracts to the in-memory implementations.
# Called from the composition root (app/composition.py).
# =============================================================================

import logging

from core.repositories.product_repository import ProductRepository
from lib.container import ServiceCollection
from lib.in_memory_repository import InMemoryProductRepository
from lib.product_store import ProductStore

logger = logging.getLogger(__name__)


def add_infrastructure_layer(services: ServiceCollection, seed: bool = True) -> ServiceCollection:
    """
    Register the product store and repository.

    Args:
        services: Collection to register on
        seed: Start the store with the seed products (otherwise empty)

    The store is a singleton so data outlives each request; the
    repository is scoped like the service that consumes it.
    """
    store = ProductStore.seeded() if seed else ProductStore()
    logger.debug(f"Product store initialised with {len(store.products)} products")

    services.add_singleton(ProductStore, instance=store)
    services.add_scoped(ProductRepository, InMemoryProductRepository)
    return services
