# =============================================================================
# app/ - FastAPI Application Package (API layer)
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - composition.py: Composition root (binds contracts to implementations)
# - dependencies.py: Per-request scope and service resolvers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
