"""Product API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from product_catalog.api.http.deps import get_product_service
from product_catalog.api.http.schemas import (
    ErrorResponse,
    ProductListResponse,
    ProductRequest,
    ProductResponse,
)
from product_catalog.core.exceptions import ValidationFailedError
from product_catalog.core.services import ProductService

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

ProductId = Annotated[int, Path(description="Product identifier")]
Service = Annotated[ProductService, Depends(get_product_service)]


@router.get("/categories", response_model=list[str])
def list_categories(service: Service) -> list[str]:
    """List every distinct product category."""
    return service.list_distinct_categories()


@router.get("", response_model=ProductListResponse)
def list_products(
    service: Service,
    category: Annotated[str, Query(min_length=1, max_length=255)],
    page: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int | None, Query(ge=1)] = None,
) -> ProductListResponse:
    """List one page of products in a category."""
    category = category.strip()
    if not category:
        raise ValidationFailedError.for_field("category", "must not be blank")
    result = service.list_by_category(category, page=page, size=size)
    return ProductListResponse.from_page(result)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(payload: ProductRequest, service: Service) -> ProductResponse:
    """Create a new product."""
    product = service.create(payload.category, payload.name)
    return ProductResponse.from_entity(product)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_product(product_id: ProductId, service: Service) -> ProductResponse:
    """Get a product by ID."""
    return ProductResponse.from_entity(service.get_by_id(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def update_product(
    product_id: ProductId, payload: ProductRequest, service: Service
) -> ProductResponse:
    """Replace the category and name of a product."""
    product = service.update(product_id, payload.category, payload.name)
    return ProductResponse.from_entity(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: ProductId, service: Service) -> Response:
    """Delete a product. Deleting a product that does not exist also succeeds."""
    service.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
