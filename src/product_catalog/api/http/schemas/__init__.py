from .product import (
    ErrorResponse,
    FieldErrorResponse,
    ProductListResponse,
    ProductRequest,
    ProductResponse,
)

__all__ = [
    "ErrorResponse",
    "FieldErrorResponse",
    "ProductListResponse",
    "ProductRequest",
    "ProductResponse",
]
