# =============================================================================
# tests/test_api.py - API Endpoint Tests
# =============================================================================
# Integration tests through FastAPI's TestClient:
# - Status codes and bodies for the five product operations
# - Silent no-op vs STRICT_NOT_FOUND for update/delete
# - Per-request scope: one service/repository per request
# - Error responses and health endpoints
#
# Every test gets a freshly built app, so the store starts at ids {1, 2, 3}.
# =============================================================================

from decimal import Decimal
from typing import Annotated

import pytest
from fastapi import Depends

from app.dependencies import ProductRepositoryDep, ProductServiceDep, ScopeDep, get_product_service
from core.services.product_service import ProductService


# =============================================================================
# List / Get
# =============================================================================

class TestReadEndpoints:
    """GET /api/products and GET /api/products/{id}."""

    def test_list_products(self, client):
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == [1, 2, 3]
        assert data[0] == {
            "id": 1,
            "name": "Laptop",
            "price": "999.99",
            "description": "Laptop de alto rendimiento",
            "stock": 10,
        }

    def test_list_empty_catalog(self, make_client):
        client = make_client(SEED_PRODUCTS=False)

        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_product(self, client):
        response = client.get("/api/products/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Mouse"

    def test_get_unknown_product(self, client):
        response = client.get("/api/products/999")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "PRODUCT_NOT_FOUND"
        assert data["details"] == {"product_id": 999}

    def test_get_non_integer_id(self, client):
        response = client.get("/api/products/abc")

        assert response.status_code == 422


# =============================================================================
# Create
# =============================================================================

class TestCreateEndpoint:
    """POST /api/products."""

    def test_create_product(self, client, sample_product_payload):
        response = client.post("/api/products", json=sample_product_payload)

        assert response.status_code == 201
        data = response.json()
        assert data == {"id": 4, **sample_product_payload}
        assert response.headers["location"] == "/api/products/4"

    def test_location_points_at_created_product(self, client, sample_product_payload):
        created = client.post("/api/products", json=sample_product_payload)

        response = client.get(created.headers["location"])

        assert response.status_code == 200
        assert response.json() == created.json()

    def test_create_ignores_id_in_body(self, client, sample_product_payload):
        response = client.post("/api/products", json={"id": 1, **sample_product_payload})

        assert response.json()["id"] == 4
        assert client.get("/api/products/1").json()["name"] == "Laptop"

    @pytest.mark.parametrize("price", ["12345678901234567.89", "0.123456789012345678901"])
    def test_price_precision_round_trip(self, client, sample_product_payload, price):
        created = client.post("/api/products", json={**sample_product_payload, "price": price})

        fetched = client.get(f"/api/products/{created.json()['id']}")

        assert Decimal(created.json()["price"]) == Decimal(price)
        assert Decimal(fetched.json()["price"]) == Decimal(price)

    def test_create_missing_field(self, client):
        response = client.post("/api/products", json={"name": "Monitor", "price": 1.0, "stock": 1})

        assert response.status_code == 422

    def test_created_ids_increase(self, client, sample_product_payload):
        ids = [client.post("/api/products", json=sample_product_payload).json()["id"] for _ in range(3)]

        assert ids == [4, 5, 6]


# =============================================================================
# Update / Delete
# =============================================================================

class TestUpdateEndpoint:
    """PUT /api/products/{id}."""

    def test_update_product(self, client):
        payload = {"name": "Teclado RGB", "price": "59.99", "description": "RGB", "stock": 25}

        response = client.put("/api/products/3", json=payload)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/products/3").json() == {"id": 3, **payload}

    def test_update_unknown_id_is_no_content(self, client, sample_product_payload):
        before = client.get("/api/products").json()

        response = client.put("/api/products/999", json=sample_product_payload)

        assert response.status_code == 204
        assert client.get("/api/products").json() == before

    def test_update_unknown_id_strict(self, make_client, sample_product_payload):
        client = make_client(STRICT_NOT_FOUND=True)

        response = client.put("/api/products/999", json=sample_product_payload)

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"

    def test_update_missing_field(self, client):
        response = client.put("/api/products/1", json={"name": "Only name"})

        assert response.status_code == 422


class TestDeleteEndpoint:
    """DELETE /api/products/{id}."""

    def test_delete_product(self, client):
        response = client.delete("/api/products/2")

        assert response.status_code == 204
        assert client.get("/api/products/2").status_code == 404

    def test_delete_unknown_id_is_no_content(self, client):
        response = client.delete("/api/products/999")

        assert response.status_code == 204
        assert len(client.get("/api/products").json()) == 3

    def test_delete_unknown_id_strict(self, make_client):
        client = make_client(STRICT_NOT_FOUND=True)

        assert client.delete("/api/products/999").status_code == 404
        assert client.delete("/api/products/1").status_code == 204


# =============================================================================
# Scenario
# =============================================================================

class TestCatalogScenario:
    """Create Monitor, delete Mouse, check what is left."""

    def test_full_scenario(self, client):
        created = client.post(
            "/api/products",
            json={"name": "Monitor", "price": "199.99", "description": "4K", "stock": 5},
        )
        assert created.json()["id"] == 4
        assert len(client.get("/api/products").json()) == 4

        client.delete("/api/products/2")

        assert client.get("/api/products/2").status_code == 404
        products = client.get("/api/products").json()
        assert [p["id"] for p in products] == [1, 3, 4]

    def test_apps_do_not_share_stores(self, make_client, sample_product_payload):
        first = make_client()
        second = make_client()

        first.post("/api/products", json=sample_product_payload)

        assert len(first.get("/api/products").json()) == 4
        assert len(second.get("/api/products").json()) == 3


# =============================================================================
# Request Scope
# =============================================================================

class TestRequestScope:
    """One scope per request, shared by every dependency of that request."""

    def test_same_instances_within_request(self, client):
        def second_service(scope: ScopeDep) -> ProductService:
            return scope.resolve(ProductService)

        @client.app.get("/_probe/scope")
        async def probe(
            service: ProductServiceDep,
            repository: ProductRepositoryDep,
            other: Annotated[ProductService, Depends(second_service)],
        ):
            return {
                "same_service": service is other,
                "same_repository": service._repository is repository,
            }

        first = client.get("/_probe/scope").json()

        assert first["same_service"] is True
        assert first["same_repository"] is True

    def test_new_instances_per_request(self, client):
        seen = []

        @client.app.get("/_probe/instances")
        async def probe(service: Annotated[ProductService, Depends(get_product_service)]):
            seen.append(service)
            return {}

        client.get("/_probe/instances")
        client.get("/_probe/instances")

        assert len(seen) == 2
        assert seen[0] is not seen[1]
        assert seen[0]._repository._store is seen[1]._repository._store


# =============================================================================
# Errors & Health
# =============================================================================

class TestErrorsAndHealth:
    """Exception handlers and health endpoints."""

    def test_unbound_dependency_returns_500(self, client):
        class Unbound:
            pass

        @client.app.get("/_probe/unbound")
        async def probe(scope: ScopeDep):
            scope.resolve(Unbound)
            return {}

        response = client.get("/_probe/unbound")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "DEPENDENCY_RESOLUTION_ERROR"
        assert data["reason"] == "MISSING_BINDING"

    def test_root(self, client):
        data = client.get("/").json()

        assert data["name"] == "Product Catalog API"
        assert data["health"] == "/api/health"

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "development"

    def test_readiness_reports_store_size(self, client, sample_product_payload):
        client.post("/api/products", json=sample_product_payload)

        data = client.get("/api/health/ready").json()

        assert data["status"] == "ready"
        assert data["checks"]["product_count"] == 4

    def test_liveness(self, client):
        assert client.get("/api/health/live").json()["status"] == "alive"
