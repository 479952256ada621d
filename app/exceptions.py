# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Route handlers raise these; the handlers below turn them into JSON.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from lib.container import DependencyResolutionError

logger = logging.getLogger(__name__)


class ProductCatalogException(Exception):
    """
    Base exception for the Product Catalog API.

    All HTTP-facing exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRODUCT_CATALOG_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Product Exceptions
# =============================================================================

class ProductNotFoundError(ProductCatalogException):
    """Raised when a product ID doesn't exist."""

    def __init__(self, product_id: int):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="List products with GET /api/products to find a valid id",
            details={"product_id": product_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def product_catalog_exception_handler(
    request: Request,
    exc: ProductCatalogException
) -> JSONResponse:
    """
    Convert ProductCatalogException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def dependency_resolution_exception_handler(
    request: Request,
    exc: DependencyResolutionError
) -> JSONResponse:
    """
    Handle container failures at request time.

    Binding errors are normally caught at startup; this covers resolutions
    of types that were never bound.
    """
    logger.error(f"Dependency resolution failed for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": exc.message,
            "code": "DEPENDENCY_RESOLUTION_ERROR",
            "reason": exc.code,
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
