"""A bounded slice of a query result plus total-count metadata."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of results.

    ``page`` is zero-based; ``total_pages`` is derived from the total number
    of matching items and the requested page size.
    """

    items: list[T] = Field(default_factory=list)
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(ge=0)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)
