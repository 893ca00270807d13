"""Request and response shapes for the product endpoints.

These are the public contract; they are built from ``Product`` entities and
never expose the table model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from product_catalog.core.models import Page
from product_catalog.entities.service.product import Product
from product_catalog.entities.service.product.entity import MAX_TEXT_LENGTH


class ProductRequest(BaseModel):
    """Body of create and update requests."""

    model_config = ConfigDict(str_strip_whitespace=True)

    category: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    name: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)


class ProductResponse(BaseModel):
    id: int
    category: str | None
    name: str | None

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponse:
        if product.id is None:
            raise ValueError("Cannot build a response for an unsaved product")
        return cls(id=product.id, category=product.category, name=product.name)


class ProductListResponse(BaseModel):
    """One page of products, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    products: list[ProductResponse]
    total_pages: int
    total_elements: int
    page: int
    size: int

    @classmethod
    def from_page(cls, page: Page[Product]) -> ProductListResponse:
        return cls(
            products=[ProductResponse.from_entity(p) for p in page.items],
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            page=page.page,
            size=page.size,
        )


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error_code: str
    error_message: str
    errors: list[FieldErrorResponse] | None = None
