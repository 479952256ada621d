# =============================================================================
# core/models/product.py - Product Entity & Transfer Schemas
# =============================================================================
# This module defines:
# - Product: the domain entity held by the repository
# - ProductCreate: input for creating a product (id is server-assigned)
# - ProductUpdate: input for overwriting a product (id comes from the path)
# - ProductResponse: output returned to clients (id + all attributes)
#
# The entity is a plain dataclass: it knows nothing about HTTP or JSON.
# The schemas are Pydantic models and define the API contract.
# =============================================================================

from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer


# -----------------------------------------------------------------------------
# Price Type
# -----------------------------------------------------------------------------
# Prices are fixed-point Decimals. JSON output carries the exact decimal text
# ("999.99"), never a binary float. Input accepts numbers or numeric strings.

Price = Annotated[
    Decimal,
    PlainSerializer(str, return_type=str, when_used="json"),
]


# =============================================================================
# Entity
# =============================================================================

@dataclass
class Product:
    """
    A product in the catalog.

    The identifier is None until the store assigns one on create, and it
    never changes afterwards. Every other field is overwritten on update.
    """
    id: int | None = None
    name: str = ""
    price: Decimal = Decimal("0")
    description: str = ""
    stock: int = 0


# =============================================================================
# Transfer Schemas
# =============================================================================

class ProductBase(BaseModel):
    """Fields shared by every product schema."""

    # Display name
    name: str = Field(
        ...,
        description="Product name",
        examples=["Monitor"],
    )

    # Unit price (fixed-point)
    price: Price = Field(
        ...,
        description="Unit price",
        examples=["199.99"],
    )

    description: str = Field(
        ...,
        description="Free-text description",
        examples=["4K"],
    )

    # Units in stock
    stock: int = Field(
        ...,
        description="Units currently in stock",
        examples=[5],
    )


class ProductCreate(ProductBase):
    """
    Schema for creating a product.

    The identifier is assigned by the store and is not accepted here.

    Example:
        {"name": "Monitor", "price": "199.99", "description": "4K", "stock": 5}
    """


class ProductUpdate(ProductBase):
    """
    Schema for updating a product.

    All fields are overwritten. The product is selected by the id in the
    URL path, never by the body.
    """


class ProductResponse(ProductBase):
    """
    Schema for returning product data to clients.

    Returned by:
    - GET /api/products (as a list)
    - GET /api/products/{id}
    - POST /api/products

    Example:
        {"id": 4, "name": "Monitor", "price": "199.99", "description": "4K", "stock": 5}
    """

    id: int = Field(
        ...,
        description="Unique product identifier",
        examples=[4],
    )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        """Copy every field of a stored entity into the response schema."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            stock=product.stock,
        )
