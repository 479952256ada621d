# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for per-request services.
# These are injected into route handlers using Depends().
#
# FastAPI caches a dependency once per request, so get_request_scope runs
# once per request and every service resolved in that request shares it.
# =============================================================================

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request

from app.config import Settings
from core.repositories.product_repository import ProductRepository
from core.services.product_service import ProductService
from lib.container import Container, Scope


def get_container(request: Request) -> Container:
    """Return the container built by create_app()."""
    return request.app.state.container


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running app was created with."""
    return request.app.state.settings


async def get_request_scope(
    container: Annotated[Container, Depends(get_container)],
) -> AsyncIterator[Scope]:
    """
    Open one resolution scope for the current request.

    The scope is closed once the response has been produced.
    """
    with container.create_scope() as scope:
        yield scope


# Type alias used by the resolvers below
ScopeDep = Annotated[Scope, Depends(get_request_scope)]


def get_product_repository(scope: ScopeDep) -> ProductRepository:
    """Resolve the request's ProductRepository."""
    return scope.resolve(ProductRepository)


def get_product_service(scope: ScopeDep) -> ProductService:
    """Resolve the request's ProductService."""
    return scope.resolve(ProductService)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ProductRepositoryDep = Annotated[ProductRepository, Depends(get_product_repository)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
