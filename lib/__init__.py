# =============================================================================
# lib/ - Infrastructure Modules
# =============================================================================
# This package contains:
# - container.py: Dependency injection container (lifetimes, scopes, validation)
# - product_store.py: Process-wide in-memory product storage
# - in_memory_repository.py: ProductRepository over the in-memory store
# - wiring.py: Registers the infrastructure layer on the service container
# - utils.py: Shared utilities (base error, formatting helpers)
# =============================================================================

from lib.container import (
    CircularDependencyError,
    Container,
    DependencyResolutionError,
    Lifetime,
    LifetimeMismatchError,
    MissingBindingError,
    Scope,
    ScopeClosedError,
    ScopeRequiredError,
    ServiceCollection,
)
from lib.in_memory_repository import InMemoryProductRepository
from lib.product_store import ProductStore
from lib.utils import ApplicationError

__all__ = [
    # Container
    "CircularDependencyError",
    "Container",
    "DependencyResolutionError",
    "Lifetime",
    "LifetimeMismatchError",
    "MissingBindingError",
    "Scope",
    "ScopeClosedError",
    "ScopeRequiredError",
    "ServiceCollection",
    # Storage
    "InMemoryProductRepository",
    "ProductStore",
    # Utils
    "ApplicationError",
]
