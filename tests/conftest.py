# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh store / repository / service per test
# - Provides a TestClient over a freshly built app (own container and store)
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("SEED_PRODUCTS", "true")
os.environ.setdefault("STRICT_NOT_FOUND", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models.product import ProductCreate, ProductUpdate
from core.services.product_service import CatalogProductService
from lib.in_memory_repository import InMemoryProductRepository
from lib.product_store import ProductStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Seeded store: ids 1, 2, 3 and next id 4."""
    return ProductStore.seeded()


@pytest.fixture
def empty_store():
    """Store with no products."""
    return ProductStore()


@pytest.fixture
def repository(store):
    """In-memory repository over the seeded store."""
    return InMemoryProductRepository(store)


@pytest.fixture
def service(repository):
    """Product service over the seeded repository."""
    return CatalogProductService(repository)


@pytest.fixture
def monitor_create():
    """Create request used by the catalog scenarios."""
    return ProductCreate(name="Monitor", price=Decimal("199.99"), description="4K", stock=5)


@pytest.fixture
def keyboard_update():
    """Update request overwriting every field."""
    return ProductUpdate(name="Teclado RGB", price=Decimal("59.99"), description="Teclado mecánico RGB", stock=25)


@pytest.fixture
def make_client():
    """Factory for TestClients over apps built with custom settings."""
    clients = []

    def _make(**overrides) -> TestClient:
        settings = Settings(**overrides)
        client = TestClient(create_app(settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    """TestClient over a default app with a freshly seeded store."""
    return make_client()


@pytest.fixture
def sample_product_payload():
    """Sample create/update body for API tests."""
    return {
        "name": "Monitor",
        "price": "199.99",
        "description": "4K",
        "stock": 5,
    }
