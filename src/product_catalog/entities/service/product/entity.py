"""Entity: Product."""

from __future__ import annotations

from pydantic import Field

from product_catalog.core.exceptions import FieldError, ValidationFailedError
from product_catalog.entities.core._base import Entity

MAX_TEXT_LENGTH = 255


def _clean(field: str, value: str | None, errors: list[FieldError]) -> str:
    text = (value or "").strip()
    if not text:
        errors.append(FieldError(field=field, message="must not be blank"))
    elif len(text) > MAX_TEXT_LENGTH:
        errors.append(
            FieldError(field=field, message=f"must be at most {MAX_TEXT_LENGTH} characters")
        )
    return text


def _clean_pair(category: str | None, name: str | None) -> tuple[str, str]:
    errors: list[FieldError] = []
    cleaned = (_clean("category", category, errors), _clean("name", name, errors))
    if errors:
        raise ValidationFailedError(errors)
    return cleaned


class Product(Entity):
    """Product entity representing a catalog item.

    ``new`` and ``apply_update`` are the only ways to produce product state,
    so both go through the same category/name checks.
    """

    category: str | None = Field(default=None, description="Grouping category")
    name: str | None = Field(default=None, description="Display name")

    @classmethod
    def new(cls, category: str | None, name: str | None) -> Product:
        """Build a product that has not been persisted yet."""
        category, name = _clean_pair(category, name)
        return cls(category=category, name=name)

    def apply_update(self, category: str | None, name: str | None) -> Product:
        """Return this product with both category and name replaced."""
        category, name = _clean_pair(category, name)
        return self.model_copy(update={"category": category, "name": name})
