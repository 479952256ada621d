# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Product Catalog API:
# - test_models.py: Entity and Pydantic schema tests
# - test_repository.py: In-memory store and repository tests
# - test_service.py: Product service tests (seeded store and test doubles)
# - test_container.py: DI container and composition root tests
# - test_config.py: Settings parsing tests
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
