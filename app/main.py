# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Product Catalog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python scripts/start_api.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.composition import build_container
from app.config import Settings, get_settings
from app.exceptions import (
    ProductCatalogException,
    dependency_resolution_exception_handler,
    product_catalog_exception_handler,
    unhandled_exception_handler,
)
from app.routers import health, products
from lib.container import DependencyResolutionError

logger = logging.getLogger(__name__)


DESCRIPTION = """
## Product Catalog API

A single CRUD resource served through a layered, dependency-injected stack:

| Layer | Package | Role |
|-------|---------|------|
| **API** | `app/` | Routes, request scope, error responses |
| **Application** | `core/services` | Business operations, entity-to-schema mapping |
| **Domain** | `core/models`, `core/repositories` | Product entity and storage contract |
| **Infrastructure** | `lib/` | In-memory store, repository, DI container |

Each request gets its own scope: the repository and service are built once
per request and shared by everything that handles it.

### Quick Start

```bash
curl http://localhost:8000/api/products

curl -X POST http://localhost:8000/api/products \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Monitor", "price": 199.99, "description": "4K", "stock": 5}'
```
"""


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The service container is built here, before the app is returned, so a
    broken binding graph fails at startup instead of on the first request.

    Args:
        settings: Settings to use (defaults to the environment-loaded ones)

    Returns:
        FastAPI: A configured application instance
    """
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    container = build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Logs startup/shutdown; the store lives as long as the container.
        """
        logger.info(f"Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode")
        logger.info(f"CORS origins: {settings.cors_origins_list}")
        yield
        logger.info(f"Shutting down {settings.APP_NAME}")

    app = FastAPI(
        title=settings.APP_NAME,
        description=DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Products",
                "description": "Create, read, update and delete products",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.container = container

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ProductCatalogException, product_catalog_exception_handler)
    app.add_exception_handler(DependencyResolutionError, dependency_resolution_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        products.router,
        prefix="/api/products",
        tags=["Products"]
    )

    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


# Create the application instance at import time for uvicorn
app = create_app()
