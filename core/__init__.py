# =============================================================================
# core/ - Domain & Application Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Product entity and Pydantic schemas
# - repositories/: Storage contracts
# - services/: Business operations
# - wiring.py: Registers the application layer on the service container
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
