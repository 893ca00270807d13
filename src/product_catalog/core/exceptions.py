"""Domain exceptions.

Raised by the service layer when a request cannot be satisfied. The API layer
translates each kind into an HTTP status and a ``{errorCode, errorMessage}``
body in one place (``product_catalog.api.http.errors``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field."""

    field: str
    message: str


class CatalogError(Exception):
    """Base class for errors the service layer raises on purpose."""

    error_code = "CATALOG_ERROR"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProductNotFoundError(CatalogError):
    """The requested product does not exist."""

    error_code = "PRODUCT_NOT_FOUND"
    status_code = 404

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} does not exist.")
        self.product_id = product_id


class ValidationFailedError(CatalogError):
    """An input value is missing, blank or out of range."""

    error_code = "VALIDATION_FAILED"
    status_code = 400

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> ValidationFailedError:
        return cls([FieldError(field=field, message=message)])
