# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Translates HTTP calls into ProductService calls and service results into
# responses. No business logic lives here.
#
#   GET    /api/products        -> 200 list
#   GET    /api/products/{id}   -> 200 product | 404
#   POST   /api/products        -> 201 product + Location header
#   PUT    /api/products/{id}   -> 204 (unknown id: 204, or 404 in strict mode)
#   DELETE /api/products/{id}   -> 204 (unknown id: 204, or 404 in strict mode)
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.dependencies import ProductServiceDep, SettingsDep
from app.exceptions import ProductNotFoundError
from core.models.product import ProductCreate, ProductResponse, ProductUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared OpenAPI description for the 404 body
NOT_FOUND_RESPONSE = {
    404: {
        "description": "Product not found",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Product not found: 999",
                    "code": "PRODUCT_NOT_FOUND",
                    "suggestion": "List products with GET /api/products to find a valid id",
                    "details": {"product_id": 999},
                }
            }
        },
    }
}

ProductIdPath = Annotated[int, Path(description="Product id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[ProductResponse])
async def list_products(service: ProductServiceDep):
    """
    List all products.

    Returns every product in the catalog, in creation order.
    """
    return await service.get_all_products()


@router.get("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSE)
async def get_product(product_id: ProductIdPath, service: ProductServiceDep):
    """Get a single product by id."""
    product = await service.get_product_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)

    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    request: Request,
    response: Response,
    service: ProductServiceDep,
):
    """
    Create a product.

    The id is assigned by the server. The Location header points at the
    new product.
    """
    product = await service.create_product(body)
    response.headers["Location"] = str(request.app.url_path_for("get_product", product_id=product.id))
    return product


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def update_product(
    product_id: ProductIdPath,
    body: ProductUpdate,
    service: ProductServiceDep,
    settings: SettingsDep,
):
    """
    Replace every field of a product.

    An unknown id is a silent no-op (204) unless STRICT_NOT_FOUND is enabled.
    """
    updated = await service.update_product(product_id, body)
    if not updated and settings.STRICT_NOT_FOUND:
        raise ProductNotFoundError(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_product(
    product_id: ProductIdPath,
    service: ProductServiceDep,
    settings: SettingsDep,
):
    """
    Delete a product.

    An unknown id is a silent no-op (204) unless STRICT_NOT_FOUND is enabled.
    """
    deleted = await service.delete_product(product_id)
    if not deleted and settings.STRICT_NOT_FOUND:
        raise ProductNotFoundError(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
