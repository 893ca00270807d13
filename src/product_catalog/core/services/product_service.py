"""Product service: the single seam between the HTTP layer and storage."""

from loguru import logger

from product_catalog.core.exceptions import ProductNotFoundError, ValidationFailedError
from product_catalog.core.models import Page
from product_catalog.core.services.database import DbSessionService
from product_catalog.entities.service.product import Product, ProductRepository
from product_catalog.runtime.config.config_data import PaginationConfig
from product_catalog.runtime.context import get_config

# Largest OFFSET the database accepts (signed 64-bit)
MAX_ROW_OFFSET = 2**63 - 1


class ProductService:
    """Create, read, update, delete and list products.

    Each public method runs in its own transaction via
    ``DbSessionService.session_scope``: a fetch, mutation and save either all
    commit or all roll back. Concurrent updates of one product are
    last-writer-wins.
    """

    def __init__(
        self,
        database_service: DbSessionService,
        pagination: PaginationConfig | None = None,
    ) -> None:
        self._database_service = database_service
        self._pagination = pagination

    @property
    def pagination(self) -> PaginationConfig:
        """Page size limits; read from the active configuration unless fixed at construction."""
        return self._pagination or get_config().pagination

    def create(self, category: str, name: str) -> Product:
        product = Product.new(category, name)
        with self._database_service.session_scope() as session:
            created = ProductRepository(session).save(product)
        logger.info("Created product {} in category {!r}", created.id, created.category)
        return created

    def get_by_id(self, product_id: int) -> Product:
        with self._database_service.session_scope() as session:
            product = ProductRepository(session).find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def update(self, product_id: int, category: str, name: str) -> Product:
        """Replace both category and name of an existing product."""
        with self._database_service.session_scope() as session:
            repository = ProductRepository(session)
            current = repository.find_by_id(product_id)
            if current is None:
                raise ProductNotFoundError(product_id)
            updated = repository.save(current.apply_update(category, name))
        logger.info("Updated product {}", product_id)
        return updated

    def delete_by_id(self, product_id: int) -> None:
        """Delete a product; deleting one that does not exist succeeds quietly."""
        with self._database_service.session_scope() as session:
            deleted = ProductRepository(session).delete_by_id(product_id)
        if deleted:
            logger.info("Deleted product {}", product_id)
        else:
            logger.debug("Product {} already absent; nothing to delete", product_id)

    def list_by_category(
        self, category: str, page: int | None = None, size: int | None = None
    ) -> Page[Product]:
        """Return one page of products in ``category``.

        ``page`` defaults to 0 and ``size`` to the configured default page size.
        """
        pagination = self.pagination
        page = 0 if page is None else page
        size = pagination.default_size if size is None else size

        if page < 0:
            raise ValidationFailedError.for_field("page", "must be greater than or equal to 0")
        if size < 1 or size > pagination.max_size:
            raise ValidationFailedError.for_field(
                "size", f"must be between 1 and {pagination.max_size}"
            )
        if page * size > MAX_ROW_OFFSET:
            raise ValidationFailedError.for_field("page", "is beyond the last possible page")

        with self._database_service.session_scope() as session:
            return ProductRepository(session).find_all_by_category(category, page, size)

    def list_distinct_categories(self) -> list[str]:
        with self._database_service.session_scope() as session:
            return ProductRepository(session).find_distinct_categories()
