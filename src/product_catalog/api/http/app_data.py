from dataclasses import dataclass

from product_catalog.core.services import DbSessionService, ProductService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    product_service: ProductService
