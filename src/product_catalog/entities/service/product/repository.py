"""Data-access layer for products."""

from sqlmodel import Session, col, func, select

from product_catalog.core.models import Page

from .entity import Product
from .table import MAX_PRODUCT_ID, MIN_PRODUCT_ID, ProductTable


class ProductRepository:
    """Data-access layer for products.

    Rows are converted to ``Product`` entities on the way out; callers never
    see a ``ProductTable``. The repository only flushes; committing is the
    job of whoever owns the session.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    def _get_row(self, product_id: int) -> ProductTable | None:
        # An id the column cannot hold cannot name a stored row
        if not MIN_PRODUCT_ID <= product_id <= MAX_PRODUCT_ID:
            return None
        return self._session.get(ProductTable, product_id)

    def save(self, product: Product) -> Product:
        """Insert a product without an id, or overwrite every field of an existing one."""
        if product.id is None:
            row = ProductTable(category=product.category, name=product.name)
            self._session.add(row)
        else:
            row = self._get_row(product.id)
            if row is None:
                raise ValueError(f"Product {product.id} not found")
            row.category = product.category
            row.name = product.name
            self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._get_row(product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def delete(self, product: Product) -> None:
        """Remove the row for ``product``; a product that is already gone is ignored."""
        if product.id is not None:
            self.delete_by_id(product.id)

    def delete_by_id(self, product_id: int) -> bool:
        """Remove the row with ``product_id`` and report whether one existed."""
        row = self._get_row(product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def find_all_by_category(self, category: str, page: int, size: int) -> Page[Product]:
        """Return one page of products whose category equals ``category``."""
        total = self._session.exec(
            select(func.count())
            .select_from(ProductTable)
            .where(ProductTable.category == category)
        ).one()
        statement = (
            select(ProductTable)
            .where(ProductTable.category == category)
            .order_by(col(ProductTable.category).asc(), col(ProductTable.id).asc())
            .offset(page * size)
            .limit(size)
        )
        rows = self._session.exec(statement).all()
        return Page[Product](
            items=[self._to_entity(row) for row in rows],
            page=page,
            size=size,
            total_elements=total,
        )

    def find_distinct_categories(self) -> list[str]:
        """Return each non-null category exactly once, in ascending order."""
        statement = (
            select(ProductTable.category)
            .where(col(ProductTable.category).is_not(None))
            .distinct()
            .order_by(col(ProductTable.category).asc())
        )
        return list(self._session.exec(statement).all())
